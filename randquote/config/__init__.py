from .load import load_config, load_raw
from .model import (
    DEFAULT_ANCHOR,
    DEFAULT_DELIM,
    SCHEMA_VERSION,
    RandQuoteCfg,
    compile_anchor,
)

__all__ = [
    "RandQuoteCfg",
    "SCHEMA_VERSION",
    "DEFAULT_ANCHOR",
    "DEFAULT_DELIM",
    "compile_anchor",
    "load_config",
    "load_raw",
]
