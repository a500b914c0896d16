"""Utility modules."""

from .parser import is_http_url, parse_ranked_link

__all__ = ["parse_ranked_link", "is_http_url"]
