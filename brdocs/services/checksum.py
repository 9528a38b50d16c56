"""
Dígito verificador módulo 11, comum a CPF e CNPJ.

O cursor de pesos começa em `initial_weight`, decrementa a cada dígito e volta
para 9 sempre que ficaria abaixo de 2. Com isso a mesma rotina cobre:

    CPF  (1º DV): 10, 9, 8, 7, 6, 5, 4, 3, 2
    CNPJ (1º DV): 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2

Os dois documentos diferem só na sequência de entrada e no peso inicial.
"""
from __future__ import annotations

MIN_WEIGHT = 2
RESET_WEIGHT = 9
MODULUS = 11

def check_digit(digits: str, initial_weight: int) -> int:
    """
    Calcula um dígito verificador para `digits` (string só com 0-9).
    Resto < 2 vira 0; caso contrário o DV é 11 - resto.
    """
    total = 0
    weight = initial_weight
    for ch in digits:
        total += int(ch) * weight
        weight -= 1
        if weight < MIN_WEIGHT:
            weight = RESET_WEIGHT

    remainder = total % MODULUS
    return 0 if remainder < 2 else MODULUS - remainder

def check_digits(base: str, initial_weight: int) -> str:
    """Os dois DVs de `base`: o 2º é calculado sobre base + 1º DV com peso + 1."""
    d1 = check_digit(base, initial_weight)
    d2 = check_digit(f"{base}{d1}", initial_weight + 1)
    return f"{d1}{d2}"
