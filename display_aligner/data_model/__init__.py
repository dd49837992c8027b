"""
資料模型模組

提供應用程式的核心資料結構
"""

from .core import AlignmentPlan, Display


__all__ = ["AlignmentPlan", "Display"]
