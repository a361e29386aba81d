from .parser import split_quotes
from .resolver import QuoteResolver, read_quote_file, resolve_quote

__all__ = ["split_quotes", "read_quote_file", "resolve_quote", "QuoteResolver"]
