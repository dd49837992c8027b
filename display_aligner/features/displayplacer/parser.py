"""
displayplacer 報告解析模組

將 `displayplacer list` 的文字輸出解析為 Display 列表
"""

import logging
import re
from typing import Final

from pydantic import ValidationError

from display_aligner.data_model import Display


logger = logging.getLogger(__name__)

# 報告中的標記行
BLOCK_START: Final[str] = "Persistent screen id:"
BLOCK_END_RESOLUTIONS: Final[str] = "Resolutions for"
REPORT_END: Final[str] = "Execute the command below"

_KEY_VALUE_RE: Final = re.compile(r"^([^:]*):(.*)$")
_RESOLUTION_RE: Final = re.compile(r"^\s*(\d+)\s*x\s*(\d+)")
_ORIGIN_RE: Final = re.compile(r"\((-?\d+),(-?\d+)\)")
_NUMBER_RE: Final = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)")


class DisplayReportError(ValueError):
    """displayplacer 報告格式錯誤"""


def _build_display(raw: dict[str, str]) -> Display:
    screen_id = raw.get("Persistent screen id", "<unknown>")

    resolution = raw.get("Resolution")
    if resolution is None:
        msg = f"Display {screen_id} has no Resolution"
        raise DisplayReportError(msg)
    res_match = _RESOLUTION_RE.match(resolution)
    if res_match is None:
        msg = f"Display {screen_id} has malformed Resolution: {resolution!r}"
        raise DisplayReportError(msg)

    origin = raw.get("Origin")
    if origin is None:
        msg = f"Display {screen_id} has no Origin"
        raise DisplayReportError(msg)
    origin_match = _ORIGIN_RE.search(origin)
    if origin_match is None:
        msg = f"Display {screen_id} has malformed Origin: {origin!r}"
        raise DisplayReportError(msg)

    rotation = 0.0
    rotation_match = _NUMBER_RE.match(raw.get("Rotation", ""))
    if rotation_match is not None:
        rotation = float(rotation_match.group(1))

    try:
        return Display(
            id=screen_id,
            resolution=(int(res_match.group(1)), int(res_match.group(2))),
            origin=(int(origin_match.group(1)), int(origin_match.group(2))),
            rotation=rotation,
            raw=raw,
        )
    except ValidationError as exc:
        msg = f"Display {screen_id} is invalid: {exc}"
        raise DisplayReportError(msg) from exc


def parse_display_report(text: str) -> list[Display]:
    """
    解析 displayplacer list 輸出

    Args:
        text: 報告全文

    Returns:
        依報告順序排列的螢幕列表

    Raises:
        DisplayReportError: 螢幕區塊缺少或含有無法解析的欄位
    """
    displays: list[Display] = []
    current: dict[str, str] | None = None

    def end_block() -> None:
        nonlocal current
        if current is not None:
            displays.append(_build_display(current))
        current = None

    for line in text.splitlines():
        if line.startswith(BLOCK_START):
            end_block()
            current = {}
        if not line.strip():
            end_block()
            continue
        if line.startswith(REPORT_END):
            break
        if line.startswith(BLOCK_END_RESOLUTIONS):
            end_block()
            continue
        if current is None:
            continue

        match = _KEY_VALUE_RE.match(line)
        if match is None or not match.group(1):
            end_block()
            continue
        current[match.group(1).strip()] = match.group(2).strip()

    end_block()
    logger.debug("Parsed %d displays", len(displays))
    return displays
