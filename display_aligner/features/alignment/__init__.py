"""
螢幕對齊功能模組

重疊分類、對齊決策與對齊執行
"""

from .aligner import align_interval, align_rect
from .overlap import (
    AxisRelation,
    OverlapLevel,
    RectRelation,
    get_axis_relation,
    get_rect_relation,
)
from .resolver import (
    AlignmentAction,
    RectAlignment,
    resolve_axis_alignment,
    resolve_rect_alignment,
    resolve_relation,
)


__all__ = [
    "AlignmentAction",
    "AxisRelation",
    "OverlapLevel",
    "RectAlignment",
    "RectRelation",
    "align_interval",
    "align_rect",
    "get_axis_relation",
    "get_rect_relation",
    "resolve_axis_alignment",
    "resolve_rect_alignment",
    "resolve_relation",
]
