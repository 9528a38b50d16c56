from __future__ import annotations
from brdocs.services.checksum import check_digit, check_digits

def test_cpf_check_digits():
    assert check_digit("883500570", 10) == 1
    assert check_digit("8835005701", 11) == 7
    assert check_digits("883500570", 10) == "17"

def test_cnpj_check_digits_use_cyclic_weights():
    assert check_digit("197832460001", 5) == 0
    assert check_digit("1978324600010", 6) == 5
    assert check_digits("042520110001", 5) == "10"

def test_weight_resets_to_nine_below_two():
    # pesos 5,4,3,2,9,... -> o 5º dígito recebe peso 9
    assert check_digit("000010000000", 5) == 2  # 9 % 11 = 9 -> 11 - 9

def test_remainder_below_two_gives_zero():
    assert check_digit("0", 10) == 0
    assert check_digit("11", 6) == 0   # 11 % 11 = 0
    assert check_digit("1", 12) == 0   # 12 % 11 = 1
    assert check_digit("12", 6) == 6   # 16 % 11 = 5 -> 6
