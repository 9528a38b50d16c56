from __future__ import annotations
import pandas as pd
import pytest

from brdocs.models import DocumentKind
from brdocs.services.batch import document_report, format_series, generate_cpf_frame, validate_series
from brdocs.services.document_validator import is_valid

@pytest.fixture
def clientes_df() -> pd.DataFrame:
    return pd.DataFrame({
        "nome": ["A", "B", "C", "D"],
        "cpf": ["883.500.570-17", "111.111.111-11", None, "80545919002"],
    })

def _as_list(s: pd.Series) -> list:
    return [v if isinstance(v, str) else None for v in s]

def test_validate_series(clientes_df):
    assert validate_series(clientes_df["cpf"], DocumentKind.CPF).tolist() == [True, False, False, True]

def test_format_series(clientes_df):
    out = format_series(clientes_df["cpf"], DocumentKind.CPF)
    assert _as_list(out) == ["883.500.570-17", None, None, "805.459.190-02"]

def test_document_report_adds_columns(clientes_df):
    rep = document_report(clientes_df, "cpf", DocumentKind.CPF)
    assert {"cpf_valido", "cpf_formatado"}.issubset(rep.columns)
    assert int(rep["cpf_valido"].sum()) == 2
    assert "cpf_valido" not in clientes_df.columns

def test_document_report_cnpj():
    df = pd.DataFrame({"cnpj": ["19783246000105", "24.247.999/0001-99"]})
    rep = document_report(df, "cnpj", DocumentKind.CNPJ)
    assert rep["cnpj_valido"].tolist() == [True, False]
    assert _as_list(rep["cnpj_formatado"]) == ["19.783.246/0001-05", None]

def test_document_report_missing_column(clientes_df):
    with pytest.raises(KeyError):
        document_report(clientes_df, "cnpj", DocumentKind.CNPJ)

def test_generate_cpf_frame(rng):
    df = generate_cpf_frame(5, rng)
    assert list(df.columns) == ["cpf"] and len(df) == 5
    assert all(is_valid(v, DocumentKind.CPF) for v in df["cpf"])
    fmt = generate_cpf_frame(3, rng, formatted=True)
    assert fmt["cpf"].str.fullmatch(r"\d{3}\.\d{3}\.\d{3}-\d{2}").all()
    assert generate_cpf_frame(0, rng).empty
