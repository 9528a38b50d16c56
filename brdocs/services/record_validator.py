"""
Validação declarativa de registros (modelos pydantic, dataclasses ou dicts).

As regras de cada campo vêm numa string no estilo "required,cpf" ou "omitempty,max=10":

    class Pessoa(BaseModel):
        nome: str = Field(json_schema_extra={"validate": "required,max=80"})
        cpf: CPF | None = Field(None, json_schema_extra={"validate": "required"})

    @dataclass
    class Contrato:
        inicio: Date = field(metadata={"validate": "required,date"})

Tipos próprios (Date, CPF, CNPJ) são "desembrulhados" para o valor primitivo
antes das regras, via um registro tipo -> função (register_custom_type).
"""
from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Annotated, Any, Callable, Dict, Iterable, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from brdocs.errors import InvalidDateFormatError, RecordValidationError
from brdocs.models.date import Date
from brdocs.models.document_kind import DocumentKind
from brdocs.models.documents import CNPJ, CPF
from brdocs.services.document_validator import is_valid
from brdocs.utils.log import get_logger

log = get_logger(__name__)

UnwrapFunc = Callable[[Any], Any]
RuleFunc = Callable[[Any, Optional[str]], bool]

RULES_KEY = "validate"


@dataclass(frozen=True)
class FieldError:
    field: str
    rule: str
    param: Optional[str] = None
    value: Any = None

    def __str__(self) -> str:
        rule = f"{self.rule}={self.param}" if self.param is not None else self.rule
        return f"campo '{self.field}' falhou na regra '{rule}'"


# ---------------- Regras padrão ----------------
#
# min/max/len/oneof/required viram restrições do próprio pydantic (Field(ge=...),
# Field(min_length=...), Literal[...]) aplicadas por TypeAdapter ao valor bruto.

# tipo do valor -> (anotação base, conversão antes de validar)
_SIZED: Tuple[Tuple[Any, Any, Callable[[Any], Any]], ...] = (
    (str, str, lambda v: v),
    (bytes, bytes, lambda v: v),
    (Mapping, dict, dict),
    ((list, tuple, set, frozenset), list, list),
)

def _base(v: Any) -> Optional[Tuple[Any, Any]]:
    """(anotação, valor convertido) usada pelas regras de tamanho; None se não se aplica."""
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return float, v
    for types, annotation, convert in _SIZED:
        if isinstance(v, types):
            return annotation, convert(v)
    return None

@lru_cache(maxsize=256)
def _bound_adapter(rule: str, param: str, annotation: Any) -> TypeAdapter:
    if annotation is float:
        n = float(param)
        constraint = {
            "min": Field(ge=n),
            "max": Field(le=n),
            "len": Field(ge=n, le=n),
        }[rule]
    else:
        n = int(param)
        if n < 0:
            raise ValueError(f"Tamanho negativo: {param}")
        constraint = {
            "min": Field(min_length=n),
            "max": Field(max_length=n),
            "len": Field(min_length=n, max_length=n),
        }[rule]
    return TypeAdapter(Annotated[annotation, constraint])

@lru_cache(maxsize=256)
def _oneof_adapter(param: str) -> Optional[TypeAdapter]:
    options = tuple(param.split())
    if not options:
        return None
    return TypeAdapter(Literal[options])

def _passes(adapter: TypeAdapter, value: Any) -> bool:
    try:
        adapter.validate_python(value)
    except ValidationError as e:
        log.debug("Valor %r rejeitado: %s", value, e.errors(include_url=False))
        return False
    return True

def _bound(rule: str) -> RuleFunc:
    def check(v: Any, param: Optional[str]) -> bool:
        base = _base(v)
        if base is None or param is None:
            return False
        annotation, value = base
        try:
            adapter = _bound_adapter(rule, param, annotation)
        except ValueError:
            # parâmetro inválido (ex.: 'max=abc', 'len=2.5' ou 'min=-1' num texto)
            return False
        return _passes(adapter, value)
    return check

def _required(v: Any, _: Optional[str] = None) -> bool:
    if v is None:
        return False
    base = _base(v)
    if base is None or base[0] is float:
        # números e booleanos sempre passam
        return True
    return _passes(_bound_adapter("min", "1", base[0]), base[1])

def _is_empty(v: Any) -> bool:
    return not _required(v)

def _oneof(v: Any, param: Optional[str]) -> bool:
    adapter = _oneof_adapter(param or "")
    return adapter is not None and _passes(adapter, str(v))

def _document(kind: DocumentKind) -> RuleFunc:
    def rule(v: Any, _: Optional[str]) -> bool:
        return isinstance(v, str) and is_valid(v, kind)
    return rule

def _date(v: Any, _: Optional[str]) -> bool:
    if isinstance(v, date):
        return True
    if isinstance(v, str):
        try:
            Date.parse(v)
        except InvalidDateFormatError:
            return False
        return True
    return False

_BUILTIN_RULES: Dict[str, RuleFunc] = {
    "required": _required,
    "cpf": _document(DocumentKind.CPF),
    "cnpj": _document(DocumentKind.CNPJ),
    "date": _date,
    "min": _bound("min"),
    "max": _bound("max"),
    "len": _bound("len"),
    "oneof": _oneof,
}

OMITEMPTY = "omitempty"


def parse_rules(spec: Optional[str]) -> List[Tuple[str, Optional[str]]]:
    """'required,max=10' -> [('required', None), ('max', '10')]"""
    out: List[Tuple[str, Optional[str]]] = []
    for part in (spec or "").split(","):
        part = part.strip()
        if not part:
            continue
        name, sep, param = part.partition("=")
        out.append((name.strip(), param.strip() if sep else None))
    return out


class RecordValidator:
    """Valida registros aplicando as regras declaradas em cada campo."""

    def __init__(self) -> None:
        self._unwrappers: Dict[type, UnwrapFunc] = {}
        self._rules: Dict[str, RuleFunc] = dict(_BUILTIN_RULES)

    def register_custom_type(self, func: UnwrapFunc, *types: type) -> None:
        """Registra `func` para converter instâncias de `types` no valor primitivo."""
        for t in types:
            self._unwrappers[t] = func

    def register_rule(self, name: str, func: RuleFunc) -> None:
        if not name or "," in name or "=" in name:
            raise ValueError(f"Nome de regra inválido: {name!r}")
        self._rules[name] = func

    def unwrap(self, value: Any) -> Any:
        for t in type(value).__mro__:
            func = self._unwrappers.get(t)
            if func is not None:
                return func(value)
        return value

    # ---------------- Validação ----------------

    def validate(self, record: Any, rules: Optional[Mapping[str, str]] = None) -> None:
        """
        Levanta RecordValidationError com todas as violações encontradas.
        `rules` (campo -> regras) sobrepõe as anotações do próprio registro.
        """
        errors = list(self._check(record, rules, prefix=""))
        if errors:
            log.debug("Registro %s inválido: %s", type(record).__name__, "; ".join(map(str, errors)))
            raise RecordValidationError(errors)

    def _check(self, record: Any, rules: Optional[Mapping[str, str]], prefix: str) -> Iterable[FieldError]:
        for name, value, spec in self._fields(record, rules):
            path = f"{prefix}{name}"
            raw = self.unwrap(value)
            yield from self._apply(path, raw, spec)
            if raw is value and _is_record(value):
                yield from self._check(value, None, prefix=f"{path}.")

    def _apply(self, path: str, value: Any, spec: Optional[str]) -> Iterable[FieldError]:
        parsed = parse_rules(spec)
        if any(name == OMITEMPTY for name, _ in parsed) and _is_empty(value):
            return
        for name, param in parsed:
            if name == OMITEMPTY:
                continue
            func = self._rules.get(name)
            if func is None:
                raise KeyError(f"Regra desconhecida '{name}' no campo '{path}'")
            if not func(value, param):
                yield FieldError(path, name, param, value)

    @staticmethod
    def _fields(record: Any, rules: Optional[Mapping[str, str]]) -> Iterable[Tuple[str, Any, Optional[str]]]:
        overrides = dict(rules or {})
        if isinstance(record, BaseModel):
            for name, info in type(record).model_fields.items():
                extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
                yield name, getattr(record, name), overrides.get(name, extra.get(RULES_KEY))
        elif dataclasses.is_dataclass(record) and not isinstance(record, type):
            for f in dataclasses.fields(record):
                yield f.name, getattr(record, f.name), overrides.get(f.name, f.metadata.get(RULES_KEY))
        elif isinstance(record, Mapping):
            for name, spec in overrides.items():
                yield name, record.get(name), spec
        else:
            raise TypeError(f"Registro não suportado: {type(record).__name__}")


def _is_record(v: Any) -> bool:
    return isinstance(v, BaseModel) or (dataclasses.is_dataclass(v) and not isinstance(v, type))


def new_record_validator() -> RecordValidator:
    """Validador com Date -> date (None se zero) e CPF/CNPJ -> string formatada."""
    v = RecordValidator()
    v.register_custom_type(lambda d: d.to_date(), Date)
    v.register_custom_type(str, CPF, CNPJ)
    return v
