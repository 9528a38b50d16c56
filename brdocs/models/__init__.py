from .document_kind import DocumentKind
from .date import Date
from .documents import Document, CPF, CNPJ

__all__ = [
    "DocumentKind",
    "Date",
    "Document",
    "CPF",
    "CNPJ",
]
