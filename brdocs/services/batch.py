from __future__ import annotations
import random
from typing import Optional, Type

import pandas as pd

from brdocs.errors import DocumentError
from brdocs.models.document_kind import DocumentKind
from brdocs.models.documents import CNPJ, CPF, Document
from brdocs.services.document_validator import is_valid
from brdocs.services.generator import default_rng, generate_cpf
from brdocs.utils.log import get_logger
from brdocs.utils.text import only_digits

log = get_logger(__name__)

_TYPES: dict[DocumentKind, Type[Document]] = {
    DocumentKind.CPF: CPF,
    DocumentKind.CNPJ: CNPJ,
}

def _cell_to_str(v) -> str:
    if v is None or (pd.api.types.is_scalar(v) and pd.isna(v)):
        return ""
    return str(v)

def validate_series(series: pd.Series, kind: DocumentKind) -> pd.Series:
    """Série booleana: True onde o documento é válido (com ou sem máscara)."""
    return series.map(lambda v: is_valid(_cell_to_str(v), kind)).astype(bool)

def _format_one(v, kind: DocumentKind) -> Optional[str]:
    # planilhas costumam trazer máscaras quebradas; reduz aos dígitos antes de formatar
    digits = only_digits(_cell_to_str(v))
    try:
        return _TYPES[kind](digits).formatted
    except DocumentError:
        return None

def format_series(series: pd.Series, kind: DocumentKind) -> pd.Series:
    """Série com a forma canônica; None onde o valor é inválido."""
    return series.map(lambda v: _format_one(v, kind)).astype(object)

def document_report(df: pd.DataFrame, column: str, kind: DocumentKind) -> pd.DataFrame:
    """
    Copia `df` acrescentando <column>_valido e <column>_formatado.
    Útil para checar colunas de CPF/CNPJ antes de publicar uma base.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {list(df.columns)}")
    out = df.copy()
    out[f"{column}_valido"] = validate_series(out[column], kind)
    out[f"{column}_formatado"] = format_series(out[column], kind)
    invalid = int((~out[f"{column}_valido"]).sum())
    if invalid:
        log.info("%d de %d valores de '%s' são %s inválidos", invalid, len(out), column, kind.value)
    return out

def generate_cpf_frame(n: int, rng: Optional[random.Random] = None, formatted: bool = False) -> pd.DataFrame:
    """DataFrame com `n` CPFs sintéticos na coluna 'cpf'."""
    if n < 0:
        raise ValueError("n deve ser >= 0")
    rng = rng or default_rng()
    values = [generate_cpf(rng) for _ in range(n)]
    if formatted:
        values = [CPF(v).formatted for v in values]
    return pd.DataFrame({"cpf": pd.Series(values, dtype=object)})
