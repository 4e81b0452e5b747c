"""Infra layer: upstream name source, HTTP client and the names cache."""

from .cache import NamesCache
from .namegen import NamegenSource, parse_names

__all__ = ["NamegenSource", "NamesCache", "parse_names"]
