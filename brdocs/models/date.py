from __future__ import annotations
import json
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from brdocs.errors import InvalidDateFormatError

LAYOUT = "%Y-%m-%d"
_LAYOUT_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

ZERO = date.min  # 0001-01-01, serializado como null


@dataclass(frozen=True, order=True)
class Date:
    """
    Data de calendário (sem hora) com JSON no formato "AAAA-MM-DD".
    A data zero (Date()) vira o literal null.
    """

    value: date = ZERO

    def __post_init__(self) -> None:
        v = self.value
        if isinstance(v, datetime):
            object.__setattr__(self, "value", v.date())
        elif not isinstance(v, date):
            raise TypeError(f"Date espera datetime.date, recebeu {type(v).__name__}")

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Exige exatamente AAAA-MM-DD (timestamps completos são rejeitados)."""
        if not isinstance(text, str) or not _LAYOUT_RE.fullmatch(text):
            raise InvalidDateFormatError(text)
        try:
            return cls(datetime.strptime(text, LAYOUT).date())
        except ValueError as e:
            # ex.: 2016-02-30
            raise InvalidDateFormatError(text) from e

    def is_zero(self) -> bool:
        return self.value == ZERO

    def to_date(self) -> Optional[date]:
        return None if self.is_zero() else self.value

    def format(self, fmt: str) -> str:
        return self.value.strftime(fmt)

    def __str__(self) -> str:
        return self.value.isoformat()

    # ---------------- JSON ----------------

    def to_json(self) -> str:
        if self.is_zero():
            return "null"
        return json.dumps(self.value.isoformat())

    @classmethod
    def from_json(cls, text: str | bytes) -> "Date":
        try:
            raw = json.loads(text)
        except (TypeError, ValueError) as e:
            raise InvalidDateFormatError(text) from e
        if raw is None:
            return cls()
        return cls.parse(raw)

    # ---------------- pydantic ----------------

    @classmethod
    def _coerce(cls, v: Any) -> "Date":
        if isinstance(v, cls):
            return v
        if v is None:
            return cls()
        if isinstance(v, date):
            return cls(v)
        return cls.parse(v)

    def _serialize(self, info: core_schema.SerializationInfo) -> Any:
        # python: datetime.date (None se zero); json: "AAAA-MM-DD" ou null
        if info.mode_is_json():
            return None if self.is_zero() else self.value.isoformat()
        return self.to_date()

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_json = core_schema.union_schema([
            core_schema.chain_schema([
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]),
            core_schema.no_info_after_validator_function(lambda _: cls(), core_schema.none_schema()),
        ])
        return core_schema.json_or_python_schema(
            json_schema=from_json,
            python_schema=core_schema.no_info_plain_validator_function(cls._coerce),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True, when_used="always",
            ),
        )
