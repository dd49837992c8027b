"""
對齊決策模組

將單軸重疊關係轉換為五種對齊動作之一：
- before: 放在基準之前（貼齊起點外側）
- after: 放在基準之後（貼齊終點外側）
- center: 中點對齊
- min: 起點對齊
- max: 終點對齊
"""

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from display_aligner.utils.geometry import Interval, Rectangle

from .overlap import AxisRelation, OverlapLevel, get_axis_relation


logger = logging.getLogger(__name__)


class AlignmentAction(StrEnum):
    """單軸對齊動作"""

    BEFORE = "before"
    AFTER = "after"
    CENTER = "center"
    SNAP_MIN = "min"
    SNAP_MAX = "max"


@dataclass(frozen=True, slots=True)
class RectAlignment:
    """矩形對齊動作（兩軸各自獨立）"""

    x: AlignmentAction
    y: AlignmentAction

    def with_overrides(
        self,
        x: AlignmentAction | None = None,
        y: AlignmentAction | None = None,
    ) -> "RectAlignment":
        """
        以指定動作覆寫個別軸

        Args:
            x: X 軸動作，None 表示保留原值
            y: Y 軸動作，None 表示保留原值

        Returns:
            新的對齊動作
        """
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )


def resolve_relation(
    relation: AxisRelation, base: Interval, curr: Interval
) -> AlignmentAction:
    """
    依關係決定對齊動作

    依序判斷，第一個符合者勝出；非對稱重疊時比較兩者中點，
    將較近的邊緣對齊

    Args:
        relation: 單軸關係
        base: 基準區間（平手時比較中點）
        curr: 目前區間

    Returns:
        對齊動作
    """
    match relation.min_side, relation.max_side:
        case (OverlapLevel.CLEARED | OverlapLevel.ADJACENT, _):
            return AlignmentAction.BEFORE
        case (_, OverlapLevel.CLEARED | OverlapLevel.ADJACENT):
            return AlignmentAction.AFTER
        case (OverlapLevel.INSIDE, OverlapLevel.INSIDE):
            # 完全包含在基準內
            return AlignmentAction.CENTER
        case (OverlapLevel.STICKING_OUT, OverlapLevel.STICKING_OUT):
            # 兩側都突出，橫跨整個基準
            return AlignmentAction.CENTER
        case (
            OverlapLevel.STICKING_OUT | OverlapLevel.ALIGNED | OverlapLevel.INSIDE,
            OverlapLevel.STICKING_OUT | OverlapLevel.ALIGNED | OverlapLevel.INSIDE,
        ):
            if curr.mid < base.mid:
                return AlignmentAction.SNAP_MIN
            return AlignmentAction.SNAP_MAX
    msg = f"Unhandled relation: {relation!r}"
    raise AssertionError(msg)


def resolve_axis_alignment(base: Interval, curr: Interval) -> AlignmentAction:
    """
    計算單軸最接近的對齊動作

    Args:
        base: 基準區間
        curr: 目前區間

    Returns:
        對齊動作
    """
    return resolve_relation(get_axis_relation(base, curr), base, curr)


def resolve_rect_alignment(base: Rectangle, curr: Rectangle) -> RectAlignment:
    """
    計算矩形最接近的對齊動作

    Args:
        base: 基準矩形
        curr: 目前矩形

    Returns:
        X、Y 兩軸的對齊動作
    """
    alignment = RectAlignment(
        x=resolve_axis_alignment(base.x, curr.x),
        y=resolve_axis_alignment(base.y, curr.y),
    )
    logger.debug("Rect alignment: x=%s, y=%s", alignment.x, alignment.y)
    return alignment
