from __future__ import annotations
from typing import TYPE_CHECKING, Any, Iterable, List

if TYPE_CHECKING:
    from .models.document_kind import DocumentKind
    from .services.record_validator import FieldError


class DocumentError(ValueError):
    """Base dos erros de CPF/CNPJ. Guarda o tipo do documento e o valor recebido."""

    reason = "documento inválido"

    def __init__(self, kind: "DocumentKind", value: Any = None):
        self.kind = kind
        self.value = value
        msg = f"{kind.value} inválido"
        if value is not None:
            msg = f"{msg}: {self.reason} ({value!r})"
        super().__init__(msg)


class InvalidFormatError(DocumentError):
    """Entrada não é nem só dígitos no tamanho certo nem a máscara canônica."""

    reason = "formato não reconhecido"


class InvalidDocumentError(DocumentError):
    """Formato aceitável, mas os dígitos verificadores não conferem."""

    reason = "dígitos verificadores não conferem"


class InvalidDateFormatError(ValueError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Data inválida {value!r}: formato esperado AAAA-MM-DD")


class RecordValidationError(ValueError):
    """Uma ou mais regras de campo falharam; `errors` traz cada violação."""

    def __init__(self, errors: Iterable["FieldError"]):
        self.errors: List["FieldError"] = list(errors)
        detail = "; ".join(str(e) for e in self.errors)
        super().__init__(f"{len(self.errors)} erro(s) de validação: {detail}")
