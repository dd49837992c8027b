"""
displayplacer 整合模組

報告解析、指令組裝與執行
"""

from .command import (
    build_command,
    build_placement_argument,
    format_origin,
    format_shell_command,
)
from .parser import DisplayReportError, parse_display_report
from .runner import DisplayPlacerError, DisplayPlacerRunner


__all__ = [
    "DisplayPlacerError",
    "DisplayPlacerRunner",
    "DisplayReportError",
    "build_command",
    "build_placement_argument",
    "format_origin",
    "format_shell_command",
    "parse_display_report",
]
