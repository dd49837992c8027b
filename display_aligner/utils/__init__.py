"""
工具模組
"""

from .geometry import Interval, Rectangle


__all__ = ["Interval", "Rectangle"]
