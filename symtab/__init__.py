"""Scoped hash-bucketed symbol tables, a command driver and hash collision reports."""

__version__ = "0.1.0"
__all__ = ["hashing", "symbol", "scope", "table", "cli", "report", "lexical"]