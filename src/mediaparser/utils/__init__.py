"""Utility modules for mediaparser."""

from mediaparser.utils.config import resolve_setting

__all__ = ["resolve_setting"]
