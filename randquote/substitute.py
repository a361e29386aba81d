from __future__ import annotations

import logging
from re import Match
from typing import Callable, Optional, Sequence

from .config.model import RandQuoteCfg
from .errors import QuoteNotFoundError

logger = logging.getLogger(__name__)

# filename -> quote text; may raise QuoteNotFoundError
ResolveFn = Callable[[str], str]


def substitute_quotes(
    body: Optional[str],
    category_path: Sequence[str],
    cfg: RandQuoteCfg,
    resolve: ResolveFn,
) -> Optional[str]:
    """
    Replace every marker in `body` with a quote from the referenced file.

    All non-overlapping matches of `cfg.anchor` are replaced in one pass.
    A marker whose file cannot be resolved is replaced with the error
    text instead, so one bad reference does not blank out the entry.
    Text outside the matched spans is left as is.
    """
    if not body:
        return body

    def _replace(m: Match[str]) -> str:
        filename = m.group(1)
        if not filename:
            # optional group in a custom anchor did not participate
            return m.group(0)
        try:
            return resolve(filename)
        except QuoteNotFoundError as e:
            logger.warning("rand_quote in /%s: %s", "/".join(category_path), e)
            return f"{e}\n"

    return cfg.anchor.sub(_replace, body)


__all__ = ["substitute_quotes", "ResolveFn"]
