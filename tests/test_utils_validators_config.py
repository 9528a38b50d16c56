from __future__ import annotations
import logging
import pytest

from brdocs.utils.config import generator_seed, log_level, reset_settings, set_settings, setting, settings
from brdocs.utils.log import get_logger
from brdocs.utils.text import all_equal, only_digits, safe_int
from brdocs.utils.validators_br import format_cnpj, format_cpf, is_valid_cnpj, is_valid_cpf

def test_cpf_validation_and_format():
    assert is_valid_cpf("529.982.247-25") is True  # CPF de teste amplamente usado
    assert is_valid_cpf("000.000.000-00") is False
    assert format_cpf("52998224725") == "529.982.247-25"
    assert format_cpf("5299822") == "5299822"

def test_cnpj_format_and_invalid():
    assert format_cnpj("04252011000110") == "04.252.011/0001-10"
    assert is_valid_cnpj("04.252.011/0001-10") is True
    assert is_valid_cnpj("11.111.111/1111-11") is False  # repetido inválido

def test_text_utils():
    assert only_digits(" 883.500.570-17 ") == "88350057017"
    assert only_digits("abc") == "" and only_digits(None) == ""
    assert all_equal("1111") and not all_equal("1112") and not all_equal("")
    assert safe_int("12.0") == 12 and safe_int("x") is None and safe_int("", 3) == 3

def test_settings_defaults_and_overrides():
    assert setting("BRDOCS_LOG_LEVEL") == "WARNING"
    assert log_level() == logging.WARNING
    assert generator_seed() is None
    set_settings({"BRDOCS_SEED": "42", "BRDOCS_LOG_LEVEL": "debug"})
    assert generator_seed() == 42
    assert log_level() == logging.DEBUG

def test_env_has_priority(monkeypatch):
    set_settings({"BRDOCS_SEED": "42"})
    monkeypatch.setenv("BRDOCS_SEED", "7")
    settings.cache_clear()
    assert generator_seed() == 7

def test_unknown_keys():
    with pytest.raises(KeyError):
        set_settings({"OUTRA": "1"})
    with pytest.raises(KeyError):
        setting("OUTRA")

def test_invalid_level_falls_back_to_warning():
    set_settings({"BRDOCS_LOG_LEVEL": "barulhento"})
    assert log_level() == logging.WARNING

def test_get_logger_single_handler():
    a = get_logger("brdocs.tests.a")
    b = get_logger("brdocs.tests.b", level=logging.INFO)
    root = logging.getLogger("brdocs")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO
    assert a.parent is root
    assert b.name == "brdocs.tests.b"

def test_log_level_override_reaches_logger():
    logger = get_logger("brdocs.services.document_validator")
    set_settings({"BRDOCS_LOG_LEVEL": "DEBUG"})
    assert logger.getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("brdocs").isEnabledFor(logging.DEBUG)
    reset_settings()
    assert logger.getEffectiveLevel() == logging.WARNING

def test_each_test_starts_with_default_logger_level():
    # get_logger(level=INFO) em outro teste não pode vazar para cá
    assert logging.getLogger("brdocs").level == logging.WARNING
