from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern
from typing import Any, Dict, Iterable, Optional

from ..errors import RandQuoteConfigError

SCHEMA_VERSION = 1

# <!--quote(fortunes)--> or <!-- quote(dir/file.txt) -->
DEFAULT_ANCHOR = r"<!--\s*quote\(([./\w]+)\)\s*-->"
# fortune data files separate quotes with a line holding a single '%'
DEFAULT_DELIM = "%\n"


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise RandQuoteConfigError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def compile_anchor(pattern: str | Pattern[str]) -> Pattern[str]:
    """
    Compile the marker pattern and check it captures the filename.

    Group 1 of every match is taken as the quote file reference.
    """
    if isinstance(pattern, re.Pattern):
        rx = pattern
    else:
        if not isinstance(pattern, str) or not pattern:
            raise RandQuoteConfigError("rand_quote_anchor must be a non-empty string")
        try:
            rx = re.compile(pattern)
        except re.error as e:
            raise RandQuoteConfigError(f"rand_quote_anchor is not a valid regex: {e}") from e
    if rx.groups < 1:
        raise RandQuoteConfigError(
            f"rand_quote_anchor must have a capture group for the filename: {rx.pattern!r}"
        )
    return rx


@dataclass(frozen=True)
class RandQuoteCfg:
    """
    Config of the rand_quote entry action.
    """
    # marker in the entry body; group 1 is the quote file reference
    anchor: Pattern[str] = field(default_factory=lambda: re.compile(DEFAULT_ANCHOR))
    # separator between quotes inside a quote file
    delim: str = DEFAULT_DELIM

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> RandQuoteCfg:
        if not d:
            # Nothing configured → defaults
            return RandQuoteCfg()
        _assert_only_keys(d, ["schema_version", "rand_quote_anchor", "rand_quote_delim"], ctx="RandQuoteCfg")

        version = d.get("schema_version")
        version = SCHEMA_VERSION if version is None else version
        if version != SCHEMA_VERSION:
            raise RandQuoteConfigError(
                f"Unsupported config schema {version} (tool expects {SCHEMA_VERSION})"
            )

        anchor_raw = d.get("rand_quote_anchor")
        anchor = compile_anchor(anchor_raw if anchor_raw is not None else DEFAULT_ANCHOR)

        # keys present but left empty (null) fall back to the default like missing ones
        delim_raw = d.get("rand_quote_delim")
        delim = DEFAULT_DELIM if delim_raw is None else delim_raw
        if not isinstance(delim, str):
            raise RandQuoteConfigError(
                f"rand_quote_delim must be a string, got {type(delim).__name__}"
            )
        if delim == "":
            raise RandQuoteConfigError("rand_quote_delim must not be empty")

        return RandQuoteCfg(anchor=anchor, delim=delim)


__all__ = ["RandQuoteCfg", "SCHEMA_VERSION", "DEFAULT_ANCHOR", "DEFAULT_DELIM", "compile_anchor"]
