from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Dict, Optional

from .text import safe_int

_DEFAULTS: Dict[str, str] = {
    # Logging
    "BRDOCS_LOG_LEVEL": "WARNING",
    # Gerador (vazio = semente do sistema operacional)
    "BRDOCS_SEED": "",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}
# incrementado a cada set_settings/reset_settings (o gerador recria sua fonte aleatória)
_version = 0

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário com as configurações efetivas:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. BRDOCS_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = env_val.strip()
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    for k, v in (overrides or {}).items():
        if k not in _DEFAULTS:
            raise KeyError(f"Configuração '{k}' desconhecida. Chaves válidas: {', '.join(sorted(_DEFAULTS))}")
        _runtime_overrides[k] = "" if v is None else str(v).strip()
    _changed()

def reset_settings() -> None:
    """Descarta overrides e limpa o cache (volta para ENV/defaults)."""
    _runtime_overrides.clear()
    _changed()

def _changed() -> None:
    global _version
    _version += 1
    settings.cache_clear()  # type: ignore[attr-defined]
    logging.getLogger("brdocs").setLevel(log_level())

def settings_version() -> int:
    return _version

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' não definida. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]

def log_level() -> int:
    name = setting("BRDOCS_LOG_LEVEL").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

def generator_seed() -> Optional[int]:
    return safe_int(setting("BRDOCS_SEED"))
