"""Look up upcoming public holidays with a same-day local cache."""

__version__ = "0.1.0"
