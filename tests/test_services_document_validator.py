from __future__ import annotations
import pytest

from brdocs.errors import InvalidDocumentError
from brdocs.models import DocumentKind
from brdocs.services.checksum import check_digits
from brdocs.services.document_validator import is_valid, validate, validate_cnpj, validate_cpf

def test_valid_cpfs(valid_cpfs):
    for cpf in valid_cpfs:
        validate_cpf(cpf)
        assert is_valid(cpf, DocumentKind.CPF)

@pytest.mark.parametrize("cpf", [
    "",                  # vazio
    "601",               # curto
    "714.330.560",       # sem DVs
    "111.111.111-11",    # todos iguais
    "714.330.560-99",    # DV correto é 03
    "60140404049",       # DV correto é 40
    " 68167355088  ",    # DV correto é 12
    "883.500.570-170",   # dígito a mais não é truncado
])
def test_invalid_cpfs(cpf):
    with pytest.raises(InvalidDocumentError) as exc:
        validate_cpf(cpf)
    assert exc.value.kind is DocumentKind.CPF
    assert exc.value.value == cpf

def test_valid_cnpjs(valid_cnpjs):
    for cnpj in valid_cnpjs:
        validate_cnpj(cnpj)

@pytest.mark.parametrize("cnpj", [
    "",
    "24.2",
    "24.247.999/0001",
    "22.222.222/2222-22",
    "24.247.999/0001-99",  # DV correto é 36
    "01941097000199",      # DV correto é 08
    " 65728975000109  ",   # DV correto é 86
])
def test_invalid_cnpjs(cnpj):
    with pytest.raises(InvalidDocumentError) as exc:
        validate_cnpj(cnpj)
    assert exc.value.kind is DocumentKind.CNPJ

def test_kind_mismatch_is_invalid():
    assert not is_valid("19.783.246/0001-05", DocumentKind.CPF)
    assert not is_valid("883.500.570-17", DocumentKind.CNPJ)

def test_all_equal_digits_rejected_for_both_kinds():
    for d in "0123456789":
        assert not is_valid(d * DocumentKind.CPF.length, DocumentKind.CPF)
        assert not is_valid(d * DocumentKind.CNPJ.length, DocumentKind.CNPJ)

def test_base_plus_computed_digits_always_validates(rng):
    for kind in DocumentKind:
        for _ in range(300):
            base = "".join(str(rng.randrange(10)) for _ in range(kind.first_check_index))
            if base == base[0] * len(base):
                continue
            validate(base + check_digits(base, kind.initial_weight), kind)

def test_punctuation_and_spaces_are_ignored():
    assert is_valid("883 500 570 17", DocumentKind.CPF)
    assert is_valid("19-783-246 0001.05", DocumentKind.CNPJ)
