"""Validação, formatação e geração de CPF/CNPJ (módulo 11)."""
# models antes de services: models.documents depende de services.document_validator
from .models import CNPJ, CPF, Date, Document, DocumentKind
from .services import (
    check_digit,
    generate_cpf,
    generate_cpf_formatted,
    is_valid,
    validate,
    validate_cnpj,
    validate_cpf,
)
from .services.record_validator import FieldError, RecordValidator, new_record_validator
from .errors import (
    DocumentError,
    InvalidDateFormatError,
    InvalidDocumentError,
    InvalidFormatError,
    RecordValidationError,
)
from .utils.text import only_digits

__version__ = "0.1.0"

__all__ = [
    "CPF", "CNPJ", "Date", "Document", "DocumentKind",
    "check_digit", "is_valid", "validate", "validate_cpf", "validate_cnpj",
    "generate_cpf", "generate_cpf_formatted",
    "FieldError", "RecordValidator", "new_record_validator",
    "DocumentError", "InvalidDateFormatError", "InvalidDocumentError",
    "InvalidFormatError", "RecordValidationError",
    "only_digits",
]
