"""
display-aligner: 依重疊關係將一個螢幕貼齊到另一個螢幕
"""

from .features.alignment import (
    AlignmentAction,
    AxisRelation,
    OverlapLevel,
    RectAlignment,
    RectRelation,
    align_interval,
    align_rect,
    get_axis_relation,
    get_rect_relation,
    resolve_axis_alignment,
    resolve_rect_alignment,
)
from .utils.geometry import Interval, Rectangle


__version__ = "0.1.0"

__all__ = [
    "AlignmentAction",
    "AxisRelation",
    "Interval",
    "OverlapLevel",
    "RectAlignment",
    "RectRelation",
    "Rectangle",
    "__version__",
    "align_interval",
    "align_rect",
    "get_axis_relation",
    "get_rect_relation",
    "resolve_axis_alignment",
    "resolve_rect_alignment",
]
