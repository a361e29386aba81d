"""
Quote file lookup and random selection.

Nothing is cached: every call walks the candidate list, re-reads the
file that was found and draws a fresh unit from it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .parser import split_quotes
from ..config.model import DEFAULT_DELIM
from ..errors import EmptyQuoteFileError, QuoteNotFoundError
from ..paths import candidate_paths

logger = logging.getLogger(__name__)

# OS-backed and stateless, so safe to share between threads
_SYSTEM_RANDOM = random.SystemRandom()


def _decode(raw: bytes, path: Path) -> str:
    """
    UTF-8 decode without newline translation; the delimiter is matched
    against the file's own line endings.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Quote file %s is not valid UTF-8 (%s); undecodable bytes replaced", path, e.reason)
        return raw.decode("utf-8", errors="replace")


def read_quote_file(
    filename: str,
    category_path: Sequence[str],
    *,
    data_dir: Path | str,
    html_dir: Path | str = "",
) -> Tuple[Path, str]:
    """
    Find and read a quote file.

    Args:
        filename: Reference captured from the marker
        category_path: Category segments of the current entry
        data_dir: Top of the data directory
        html_dir: Top of the HTML directory ("" → process cwd)

    Returns:
        (path that was opened, whole file content)

    Raises:
        QuoteNotFoundError: none of the candidates could be opened;
            carries the last attempted path and its OS error
    """
    candidates = candidate_paths(filename, category_path, data_dir=data_dir, html_dir=html_dir)
    last_path: Path = candidates[-1]
    last_error: Optional[OSError] = None

    for path in candidates:
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.debug("Quote file candidate %s: %s", path, e.strerror or e)
            last_path, last_error = path, e
            continue
        logger.debug("Quote file %r resolved to %s", filename, path)
        return path, _decode(raw, path)

    reason = (last_error.strerror or str(last_error)) if last_error is not None else "not found"
    raise QuoteNotFoundError(last_path, reason, searched=candidates)


def resolve_quote(
    filename: str,
    category_path: Sequence[str],
    *,
    data_dir: Path | str,
    html_dir: Path | str = "",
    delim: str = DEFAULT_DELIM,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Return one quote, chosen uniformly at random, from the quote file
    `filename` looked up relative to the entry's category.

    Raises:
        QuoteNotFoundError: the file could not be opened anywhere
        EmptyQuoteFileError: the file holds no quote units
    """
    path, text = read_quote_file(filename, category_path, data_dir=data_dir, html_dir=html_dir)
    units = split_quotes(text, delim)
    if not units:
        raise EmptyQuoteFileError(path, searched=[path])
    return (rng or _SYSTEM_RANDOM).choice(units)


@dataclass(frozen=True)
class QuoteResolver:
    """
    resolve_quote bound to one entry: a `filename -> quote` callable
    suitable as the substitution callback.
    """
    category_path: Tuple[str, ...]
    data_dir: Path
    html_dir: Path | str = ""
    delim: str = DEFAULT_DELIM
    rng: Optional[random.Random] = field(default=None, compare=False)

    def __call__(self, filename: str) -> str:
        return resolve_quote(
            filename,
            self.category_path,
            data_dir=self.data_dir,
            html_dir=self.html_dir,
            delim=self.delim,
            rng=self.rng,
        )

    def candidates(self, filename: str) -> List[Path]:
        """Where `filename` would be looked up, in order."""
        return candidate_paths(filename, self.category_path, data_dir=self.data_dir, html_dir=self.html_dir)


__all__ = ["read_quote_file", "resolve_quote", "QuoteResolver"]
