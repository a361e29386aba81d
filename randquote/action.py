"""
The `rand_quote` entry action.

Sticks a random quote from a file into the body of an entry: every
`<!--quote(filename)-->` marker is replaced with one quote taken from
that file. The action belongs after `parse_entry` (and after
`short_body`, if that action is used) and before `render_entry` in the
host's entry action list.

Example entry body:

    <pre>
    <!--quote(fortunes)-->
    </pre>
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .config import RandQuoteCfg, load_config
from .quotes import QuoteResolver
from .substitute import substitute_quotes

logger = logging.getLogger(__name__)

ENTRY_ACTION_NAME = "rand_quote"


@dataclass
class Entry:
    """The current entry as handed over by the host pipeline."""
    body: Optional[str]
    cat_id: str = ""  # "blog/2005/misc" → category of the entry


@dataclass(frozen=True)
class FlowState:
    """Per-request directories the action reads quote files from."""
    data_dir: Path
    html_dir: Path | str = ""


def split_cat_id(cat_id: str) -> Tuple[str, ...]:
    """'a/b/c' → ('a', 'b', 'c'); empty segments are dropped."""
    return tuple(seg for seg in (cat_id or "").split("/") if seg)


class RandQuoteAction:
    """
    Entry action bound to a config.

    Holds no per-entry state, so one instance can serve many entries,
    including concurrently.
    """
    name = ENTRY_ACTION_NAME

    def __init__(self, cfg: Optional[RandQuoteCfg] = None, *, rng: Optional[random.Random] = None):
        self.cfg = cfg or RandQuoteCfg()
        self.rng = rng

    @classmethod
    def from_data_dir(cls, data_dir: Path, *, rng: Optional[random.Random] = None) -> RandQuoteAction:
        """Build the action from <data_dir>/rand_quote.yaml (defaults if missing)."""
        return cls(load_config(Path(data_dir)), rng=rng)

    def resolver_for(self, flow: FlowState, entry: Entry) -> QuoteResolver:
        return QuoteResolver(
            category_path=split_cat_id(entry.cat_id),
            data_dir=Path(flow.data_dir),
            html_dir=flow.html_dir,
            delim=self.cfg.delim,
            rng=self.rng,
        )

    def __call__(self, flow: FlowState, entry: Entry) -> bool:
        """
        Rewrite entry.body in place.

        Always returns True: unresolvable markers are reported inline
        and never stop the rest of the pipeline.
        """
        if entry.body:
            resolver = self.resolver_for(flow, entry)
            entry.body = substitute_quotes(entry.body, resolver.category_path, self.cfg, resolver)
        return True


__all__ = ["ENTRY_ACTION_NAME", "Entry", "FlowState", "RandQuoteAction", "split_cat_id"]
