"""
設定模組
"""

from .app import AppSettings


__all__ = ["AppSettings"]
