"""A log-structured key-value store in the style of Bitcask, with an in-memory counterpart."""

__version__ = "0.1.0"