"""
Gerador de CPFs sintéticos (válidos, mas aleatórios) para testes e massa de dados.

A base é uma permutação dos dígitos 0..8 e os DVs usam a regra posicional

    dv = 0 se (Σ base[i] * (n + 1 - i)) % 11 < 2, senão 11 - resto

Para n <= 10 esses pesos (n+1 .. 2) coincidem com o cursor de services.checksum
iniciado em n + 1, pois o cursor nunca chega a voltar para 9. Os testes conferem
essa equivalência e que todo CPF gerado passa em validate(_, CPF).
"""
from __future__ import annotations
import random
from typing import List, Optional, Sequence, Tuple

from brdocs.models.document_kind import DocumentKind
from brdocs.utils.config import generator_seed, settings_version
from brdocs.utils.log import get_logger

log = get_logger(__name__)

# (versão das configurações, semente) -> fonte compartilhada no processo
_default: Optional[Tuple[Tuple[int, Optional[int]], random.Random]] = None

def default_rng() -> random.Random:
    """
    Fonte aleatória padrão. BRDOCS_SEED fixa a sequência; qualquer set_settings/
    reset_settings recomeça a sequência a partir da semente (seed None -> SO).
    """
    global _default
    key = (settings_version(), generator_seed())
    if _default is None or _default[0] != key:
        _default = (key, random.Random(key[1]))
    return _default[1]

def positional_check_digit(data: Sequence[int], n: int) -> int:
    total = 0
    for i in range(n):
        total += data[i] * (n + 1 - i)

    total %= 11
    if total < 2:
        return 0
    return 11 - total

def generate_cpf(rng: Optional[random.Random] = None) -> str:
    """Gera um CPF válido só com dígitos (ex.: '31740562894')."""
    rng = rng or default_rng()
    cut = DocumentKind.CPF.first_check_index

    cpf: List[int] = rng.sample(range(cut), cut)
    cpf.append(positional_check_digit(cpf, len(cpf)))
    cpf.append(positional_check_digit(cpf, len(cpf)))

    out = "".join(str(d) for d in cpf)
    log.debug("CPF gerado: %s", out)
    return out

def generate_cpf_formatted(rng: Optional[random.Random] = None) -> str:
    """Gera um CPF válido já com máscara (ddd.ddd.ddd-dd)."""
    # import local: models.documents depende de services
    from brdocs.models.documents import CPF
    return CPF(generate_cpf(rng)).formatted
