from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (mal package directory)
_MAL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _MAL_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def get_prelude_root() -> Path:
    raw = os.environ.get('MAL_PRELUDE_PATH')
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    # treat as single directory; if a file path is set, return its parent
    p = Path(raw.strip())
    return p if p.is_dir() else p.parent


def get_log_level() -> str:
    return os.environ.get('MAL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def is_debug() -> bool:
    return os.environ.get('MAL_DEBUG', '').strip().lower() in _TRUTHY
