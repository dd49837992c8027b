"""
使用者介面模組
"""

from .report import build_displays_table, build_plan_table, render_plan


__all__ = ["build_displays_table", "build_plan_table", "render_plan"]
