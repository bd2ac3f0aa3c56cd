"""Catalog Browse Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless faceted catalog browsing with in-memory filtering and pagination"
)

__all__ = ["handlers", "catalog"]
