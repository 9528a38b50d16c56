from __future__ import annotations
import logging
import sys
from typing import Optional

from .config import log_level

def get_logger(name: str = "brdocs", level: Optional[int] = None) -> logging.Logger:
    """
    Logger do pacote. O handler fica só no logger raiz ('brdocs');
    os filhos ('brdocs.services.x') propagam para ele.
    """
    root = logging.getLogger(name.split(".", 1)[0])
    if not root.handlers:
        # stderr: stdout fica reservado para a saída da CLI
        handler = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
    root.setLevel(level if level is not None else log_level())
    return logging.getLogger(name)
