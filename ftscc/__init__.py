"""Strongly connected components of directed graphs under edge failures and insertions."""

__version__ = "0.1.0"
__all__ = ["graphs", "ftrs", "reader", "hpd", "components", "failures", "queries", "updates"]