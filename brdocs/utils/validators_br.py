from __future__ import annotations

from brdocs.models.document_kind import DocumentKind
from brdocs.services.document_validator import is_valid
from brdocs.utils.text import only_digits

# ---------------- CPF ----------------

def is_valid_cpf(cpf: str) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara.
    """
    return is_valid(cpf, DocumentKind.CPF)

def format_cpf(cpf: str) -> str:
    n = only_digits(cpf)
    if len(n) != DocumentKind.CPF.length:
        return cpf
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"

# ---------------- CNPJ ----------------

def is_valid_cnpj(cnpj: str) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    """
    return is_valid(cnpj, DocumentKind.CNPJ)

def format_cnpj(cnpj: str) -> str:
    n = only_digits(cnpj)
    if len(n) != DocumentKind.CNPJ.length:
        return cnpj
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"
