from __future__ import annotations

from brdocs.errors import InvalidDocumentError
from brdocs.models.document_kind import DocumentKind
from brdocs.services.checksum import check_digits
from brdocs.utils.log import get_logger
from brdocs.utils.text import all_equal, only_digits

log = get_logger(__name__)

def is_valid(raw: str, kind: DocumentKind) -> bool:
    """
    Valida CPF/CNPJ com ou sem máscara (espaços e pontuação são ignorados).

    O tamanho final precisa ser exato: entradas maiores não são truncadas e
    sequências de dígitos repetidos (111.111.111-11) são sempre inválidas.
    """
    n = only_digits(raw)
    cut = kind.first_check_index

    if not n or len(n) < cut:
        return False
    if all_equal(n):
        return False

    base = n[:cut]
    return n == base + check_digits(base, kind.initial_weight)

def validate(raw: str, kind: DocumentKind) -> None:
    """Como is_valid(), mas levanta InvalidDocumentError quando inválido."""
    if not is_valid(raw, kind):
        log.debug("%s rejeitado: %r", kind.value, raw)
        raise InvalidDocumentError(kind, raw)

def validate_cpf(raw: str) -> None:
    validate(raw, DocumentKind.CPF)

def validate_cnpj(raw: str) -> None:
    validate(raw, DocumentKind.CNPJ)
