from __future__ import annotations
import json
import re
from dataclasses import dataclass
from typing import Any, ClassVar, FrozenSet

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from brdocs.errors import InvalidFormatError
from brdocs.models.document_kind import DocumentKind
from brdocs.services import document_validator


@dataclass(frozen=True)
class Document:
    """
    Documento (CPF/CNPJ) sempre válido: só existe se passou pelo formato e pelos DVs.

    A construção tem duas etapas:
      1. formato: aceita só dígitos no tamanho exato ou a máscara canônica
         (InvalidFormatError caso contrário); dígitos puros ganham a máscara;
      2. validação dos dígitos verificadores (InvalidDocumentError).

    Não há setters: a instância é imutável (frozen) e guarda só a forma formatada.
    """

    kind: ClassVar[DocumentKind]
    _formatted_re: ClassVar[re.Pattern]
    _digits_re: ClassVar[re.Pattern]
    _mask: ClassVar[str]
    _separators: ClassVar[FrozenSet[int]]

    value: str

    def __post_init__(self) -> None:
        if not hasattr(self, "kind"):
            raise TypeError(f"{type(self).__name__} é abstrato; use CPF ou CNPJ")
        raw = self.value
        formatted = self._canonical(raw)
        # mesmos dígitos do valor canônico; o erro ecoa o que foi recebido
        document_validator.validate(raw, self.kind)
        object.__setattr__(self, "value", formatted)

    @classmethod
    def _canonical(cls, raw: Any) -> str:
        if not isinstance(raw, str):
            raise InvalidFormatError(cls.kind, raw)
        if cls._formatted_re.fullmatch(raw):
            return raw
        if cls._digits_re.fullmatch(raw):
            return cls._digits_re.sub(cls._mask, raw)
        raise InvalidFormatError(cls.kind, raw)

    # ---------------- Acessores ----------------

    def __str__(self) -> str:
        return self.value

    @property
    def formatted(self) -> str:
        return self.value

    def digits_only(self) -> str:
        # o estado interno é sempre canônico, então as posições da máscara são fixas
        return "".join(ch for i, ch in enumerate(self.value) if i not in self._separators)

    # ---------------- JSON ----------------

    def to_json(self) -> str:
        return json.dumps(self.value)

    @classmethod
    def from_json(cls, text: str | bytes):
        """Lê uma string JSON ("841.494.050-18" ou "84149405018") e valida."""
        try:
            raw = json.loads(text)
        except (TypeError, ValueError) as e:
            raise InvalidFormatError(cls.kind, text) from e
        if not isinstance(raw, str):
            raise InvalidFormatError(cls.kind, text)
        return cls(raw)

    # ---------------- pydantic ----------------

    @classmethod
    def _coerce(cls, v: Any):
        if isinstance(v, cls):
            return v
        return cls(v)

    def _serialize(self) -> str:
        # python e json: a string canônica, que _coerce aceita de volta
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema([
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(cls._coerce),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.no_info_plain_validator_function(cls._coerce),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=False, when_used="always",
            ),
        )


class CPF(Document):
    """CPF no formato ddd.ddd.ddd-dd."""
    kind = DocumentKind.CPF
    _formatted_re = re.compile(r"(\d{3})\.(\d{3})\.(\d{3})-(\d{2})", re.ASCII)
    _digits_re = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})", re.ASCII)
    _mask = r"\1.\2.\3-\4"
    _separators = frozenset({3, 7, 11})


class CNPJ(Document):
    """CNPJ no formato dd.ddd.ddd/dddd-dd."""
    kind = DocumentKind.CNPJ
    _formatted_re = re.compile(r"(\d{2})\.(\d{3})\.(\d{3})/(\d{4})-(\d{2})", re.ASCII)
    _digits_re = re.compile(r"(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})", re.ASCII)
    _mask = r"\1.\2.\3/\4-\5"
    _separators = frozenset({2, 6, 10, 15})
