from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple


class DocumentKind(str, Enum):
    """Tipos de documento suportados. Cada um fixa os parâmetros do módulo 11."""
    CPF = "CPF"      # pessoa física, 11 dígitos
    CNPJ = "CNPJ"    # pessoa jurídica, 14 dígitos

    @property
    def first_check_index(self) -> int:
        """Posição do 1º dígito verificador (= tamanho da base)."""
        return _PARAMS[self][0]

    @property
    def initial_weight(self) -> int:
        """Peso inicial para o 1º DV; o 2º usa initial_weight + 1."""
        return _PARAMS[self][1]

    @property
    def length(self) -> int:
        return self.first_check_index + 2

    @classmethod
    def parse(cls, value: "str | DocumentKind") -> "DocumentKind":
        """Aceita 'cpf', 'CNPJ', ' Cpf ' etc."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Tipo de documento desconhecido: {value!r}. Use CPF ou CNPJ.") from None


# (first_check_index, initial_weight)
_PARAMS: Dict[DocumentKind, Tuple[int, int]] = {
    DocumentKind.CPF: (9, 10),
    DocumentKind.CNPJ: (12, 5),
}
