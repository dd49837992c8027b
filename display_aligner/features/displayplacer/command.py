"""
displayplacer 指令組裝模組
"""

import json
import logging

from display_aligner.data_model import Display
from display_aligner.utils.geometry import Rectangle


logger = logging.getLogger(__name__)


def _to_int_coordinate(value: float) -> int:
    rounded = round(value)
    if rounded != value:
        logger.warning("原點座標 %s 非整數，四捨五入為 %d", value, rounded)
    return int(rounded)


def format_origin(rect: Rectangle) -> str:
    """
    格式化原點參數

    displayplacer 只接受整數原點

    Args:
        rect: 對齊後的矩形

    Returns:
        如 "origin:(1440,-180)"
    """
    x = _to_int_coordinate(rect.x.min)
    y = _to_int_coordinate(rect.y.min)
    return f"origin:({x},{y})"


def build_placement_argument(display: Display, rect: Rectangle) -> str:
    """
    組裝單一螢幕的設定參數

    Args:
        display: 要移動的螢幕
        rect: 對齊後的矩形

    Returns:
        如 "id:<uuid> res:2560x1440 origin:(1440,0)"
    """
    resolution = display.raw.get("Resolution", f"{display.width}x{display.height}")
    return " ".join(
        [
            f"id:{display.id}",
            f"res:{resolution}",
            format_origin(rect),
        ]
    )


def build_command(executable: str, display: Display, rect: Rectangle) -> list[str]:
    """
    組裝完整指令

    Args:
        executable: displayplacer 執行檔
        display: 要移動的螢幕
        rect: 對齊後的矩形

    Returns:
        subprocess 參數列表
    """
    return [executable, build_placement_argument(display, rect)]


def format_shell_command(args: list[str]) -> str:
    """將參數以 JSON 字串引號包覆後合併，便於複製到終端機執行"""
    return " ".join(json.dumps(arg) for arg in args)
