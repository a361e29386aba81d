from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import RandQuoteCfg
from ..errors import RandQuoteConfigError
from ..paths import cfg_path

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def load_raw(path: Path) -> Dict[str, Any]:
    """
    Read rand_quote.yaml as a plain mapping.

    • Missing file → empty mapping (defaults apply).
    • Anything but a mapping at the top level is rejected.
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return {}

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f)
    except YAMLError as e:
        raise RandQuoteConfigError(f"Failed to parse {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RandQuoteConfigError(f"{path}: top level must be a mapping, got {type(raw).__name__}")
    return raw


def load_config(data_dir: Path) -> RandQuoteCfg:
    """
    Load the rand_quote config from <data_dir>/rand_quote.yaml.

    Args:
        data_dir: Top of the blog data directory

    Returns:
        Frozen RandQuoteCfg with defaults applied for missing keys
    """
    path = cfg_path(data_dir)
    cfg = RandQuoteCfg.from_dict(load_raw(path))
    logger.debug("Loaded rand_quote config from %s: anchor=%r delim=%r", path, cfg.anchor.pattern, cfg.delim)
    return cfg


__all__ = ["load_config", "load_raw"]
