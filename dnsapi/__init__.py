"""Client for parts of the DNSimple v2 API and a parser for its webhook events."""

__version__ = "0.1.0"