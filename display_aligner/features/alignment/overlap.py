"""
重疊分類模組

逐軸判斷「目前」區間的兩個邊緣相對於「基準」區間兩個邊緣的重疊程度
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

from display_aligner.utils.geometry import Interval, Rectangle


logger = logging.getLogger(__name__)


class OverlapLevel(IntEnum):
    """
    邊緣重疊程度

    以整數排序，解析器依賴 <= / >= 比較，數值不可更動
    """

    CLEARED = 0  # 完全在邊緣外側，未接觸
    ADJACENT = 1  # 剛好貼齊邊緣（外側）
    STICKING_OUT = 2  # 跨過邊緣，部分突出
    ALIGNED = 3  # 與邊緣對齊
    INSIDE = 4  # 在邊緣內側


@dataclass(frozen=True, slots=True)
class AxisRelation:
    """
    單軸關係

    Attributes:
        min_side: 目前區間相對於基準起點的重疊程度
        max_side: 目前區間相對於基準終點的重疊程度
    """

    min_side: OverlapLevel
    max_side: OverlapLevel


@dataclass(frozen=True, slots=True)
class RectRelation:
    """矩形關係（兩軸各自獨立）"""

    x: AxisRelation
    y: AxisRelation


def _classify_min_side(base: Interval, curr: Interval) -> OverlapLevel:
    if curr.min > base.min:
        return OverlapLevel.INSIDE
    if curr.min == base.min:
        return OverlapLevel.ALIGNED
    if curr.max > base.min:
        return OverlapLevel.STICKING_OUT
    if curr.max == base.min:
        return OverlapLevel.ADJACENT
    return OverlapLevel.CLEARED


def _classify_max_side(base: Interval, curr: Interval) -> OverlapLevel:
    if curr.max < base.max:
        return OverlapLevel.INSIDE
    if curr.max == base.max:
        return OverlapLevel.ALIGNED
    if curr.min < base.max:
        return OverlapLevel.STICKING_OUT
    if curr.min == base.max:
        return OverlapLevel.ADJACENT
    return OverlapLevel.CLEARED


def get_axis_relation(base: Interval, curr: Interval) -> AxisRelation:
    """
    計算單軸關係

    Args:
        base: 基準區間
        curr: 目前區間

    Returns:
        兩側邊緣的重疊程度
    """
    return AxisRelation(
        min_side=_classify_min_side(base, curr),
        max_side=_classify_max_side(base, curr),
    )


def get_rect_relation(base: Rectangle, curr: Rectangle) -> RectRelation:
    """
    計算矩形關係

    Args:
        base: 基準矩形
        curr: 目前矩形

    Returns:
        X、Y 兩軸的關係
    """
    relation = RectRelation(
        x=get_axis_relation(base.x, curr.x),
        y=get_axis_relation(base.y, curr.y),
    )
    logger.debug("Rect relation: %s", relation)
    return relation
