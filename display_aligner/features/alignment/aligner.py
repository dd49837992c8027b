"""
對齊執行模組

依對齊動作就地平移目前矩形，尺寸保持不變
"""

from typing import assert_never

from display_aligner.utils.geometry import Interval, Rectangle

from .resolver import AlignmentAction, RectAlignment


def align_interval(curr: Interval, base: Interval, action: AlignmentAction) -> None:
    """
    就地平移單軸區間

    Args:
        curr: 目前區間（會被修改）
        base: 基準區間
        action: 對齊動作
    """
    match action:
        case AlignmentAction.SNAP_MIN:
            curr.set_min(base.min)
        case AlignmentAction.SNAP_MAX:
            curr.set_max_preserving_size(base.max)
        case AlignmentAction.CENTER:
            curr.set_mid_preserving_size(base.mid)
        case AlignmentAction.BEFORE:
            curr.set_max_preserving_size(base.min)
        case AlignmentAction.AFTER:
            curr.set_min(base.max)
        case _:
            assert_never(action)


def align_rect(curr: Rectangle, base: Rectangle, alignment: RectAlignment) -> None:
    """
    就地平移矩形，兩軸分別處理

    Args:
        curr: 目前矩形（會被修改）
        base: 基準矩形
        alignment: 兩軸的對齊動作
    """
    align_interval(curr.x, base.x, alignment.x)
    align_interval(curr.y, base.y, alignment.y)
