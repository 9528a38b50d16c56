from .checksum import check_digit, check_digits
from .document_validator import is_valid, validate, validate_cpf, validate_cnpj
from .generator import generate_cpf, generate_cpf_formatted

__all__ = [
    "check_digit",
    "check_digits",
    "is_valid",
    "validate",
    "validate_cpf",
    "validate_cnpj",
    "generate_cpf",
    "generate_cpf_formatted",
]
