"""
Errors raised while loading the rand_quote config and resolving quote files.

QuoteNotFoundError and its subclass are contained per marker: their
message is what the content author sees in place of the quote.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class RandQuoteError(Exception):
    """Problem the site owner can fix: bad config, missing or empty quote file."""
    pass


class RandQuoteConfigError(RandQuoteError):
    """Raised when rand_quote.yaml (or a raw config mapping) is invalid."""
    pass


class QuoteNotFoundError(RandQuoteError):
    """
    Raised when no candidate quote file could be opened.

    Carries the last attempted path and the underlying reason; the
    message is the text that ends up inline in the entry body.
    """
    def __init__(self, path: Path | str, reason: str, searched: Sequence[Path | str] = ()):
        self.path = str(path)
        self.reason = reason
        self.searched = [str(p) for p in searched]
        super().__init__(f"Can't open {self.path}: {reason}")


class EmptyQuoteFileError(QuoteNotFoundError):
    """Raised when a quote file was opened but holds no quote units."""
    def __init__(self, path: Path | str, searched: Sequence[Path | str] = ()):
        super().__init__(path, "no quotes in file", searched)


__all__ = ["RandQuoteError", "RandQuoteConfigError", "QuoteNotFoundError", "EmptyQuoteFileError"]
