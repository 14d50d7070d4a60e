"""
Database models for the shortener core.

Only the URL record is modelled: its unique `code` column is the
storage-side half of the code uniqueness contract.
"""

from .url import URL

__all__ = ["URL"]
