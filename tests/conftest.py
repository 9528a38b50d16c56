from __future__ import annotations
import random
import pytest

from brdocs.utils.config import reset_settings

# ---------- VALORES DE REFERÊNCIA ----------

VALID_CPFS = ["883.500.570-17", "80545919002", " 93388834008  ", "841.494.050-18", "529.982.247-25"]
VALID_CNPJS = ["19.783.246/0001-05", "95040409000148", "  26053781000176  ", "04.252.011/0001-10"]

@pytest.fixture
def valid_cpfs() -> list[str]:
    return list(VALID_CPFS)

@pytest.fixture
def valid_cnpjs() -> list[str]:
    return list(VALID_CNPJS)

@pytest.fixture
def rng() -> random.Random:
    return random.Random(20160815)

# ---------- CONFIG LIMPA EM CADA TESTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Ignora BRDOCS_* do ambiente e descarta overrides entre testes.
    reset_settings() também reaplica o nível do logger 'brdocs' e
    recomeça a fonte aleatória padrão do gerador.
    """
    for key in ("BRDOCS_LOG_LEVEL", "BRDOCS_SEED"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
