from .config import settings, set_settings, reset_settings, setting, settings_version, log_level, generator_seed
from .log import get_logger
from .text import only_digits, all_equal, safe_int

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "settings_version", "log_level", "generator_seed",
    "get_logger",
    "only_digits", "all_equal", "safe_int",
]
