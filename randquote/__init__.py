"""
rand-quote: replace quote markers in blog entries with a random quote
taken from a fortune-style quote file.
"""

from .action import ENTRY_ACTION_NAME, Entry, FlowState, RandQuoteAction, split_cat_id
from .config import RandQuoteCfg, load_config
from .errors import EmptyQuoteFileError, QuoteNotFoundError, RandQuoteConfigError, RandQuoteError
from .quotes import QuoteResolver, resolve_quote, split_quotes
from .substitute import substitute_quotes

__all__ = [
    "ENTRY_ACTION_NAME",
    "Entry",
    "FlowState",
    "RandQuoteAction",
    "split_cat_id",
    "RandQuoteCfg",
    "load_config",
    "RandQuoteError",
    "RandQuoteConfigError",
    "QuoteNotFoundError",
    "EmptyQuoteFileError",
    "QuoteResolver",
    "resolve_quote",
    "split_quotes",
    "substitute_quotes",
]
