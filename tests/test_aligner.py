"""
對齊執行測試
"""

import pytest

from display_aligner.features.alignment import (
    AlignmentAction,
    OverlapLevel,
    RectAlignment,
    align_interval,
    align_rect,
    get_axis_relation,
    resolve_axis_alignment,
)
from display_aligner.utils.geometry import Interval, Rectangle


A = AlignmentAction
L = OverlapLevel


class TestAlignInterval:
    """測試單軸對齊（基準 [0, 10]）"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("action", "expected_min"),
        [
            (A.SNAP_MIN, 0),
            (A.SNAP_MAX, 6),
            (A.CENTER, 3),
            (A.BEFORE, -4),
            (A.AFTER, 10),
        ],
    )
    def test_each_action(
        self, base_interval: Interval, action: AlignmentAction, expected_min: float
    ) -> None:
        curr = Interval(37, 4)
        align_interval(curr, base_interval, action)
        assert curr.min == expected_min
        assert curr.size == 4
        assert base_interval == Interval(0, 10)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("curr", "expected_min"),
        [
            (Interval(20, 5), 10),
            (Interval(2, 4), 3),
            (Interval(-5, 20), -5),
            (Interval(-2, 5), 0),
            (Interval(10, 0), 10),
        ],
    )
    def test_reference_scenarios(
        self, base_interval: Interval, curr: Interval, expected_min: float
    ) -> None:
        size = curr.size
        align_interval(curr, base_interval, resolve_axis_alignment(base_interval, curr))
        assert curr.min == expected_min
        assert curr.size == size

    @pytest.mark.unit
    def test_center_can_produce_fractional_origin(self, base_interval: Interval) -> None:
        curr = Interval(1, 3)
        align_interval(curr, base_interval, A.CENTER)
        assert curr.min == 3.5
        assert curr.mid == base_interval.mid


class TestAlignmentResult:
    """對齊後重新分類，結果應符合動作的意圖"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("action", "side", "level"),
        [
            (A.SNAP_MIN, "min_side", L.ALIGNED),
            (A.SNAP_MAX, "max_side", L.ALIGNED),
            (A.BEFORE, "min_side", L.ADJACENT),
            (A.AFTER, "max_side", L.ADJACENT),
        ],
    )
    def test_relation_after_align(
        self, base_interval: Interval, action: AlignmentAction, side: str, level: OverlapLevel
    ) -> None:
        curr = Interval(-13, 7)
        align_interval(curr, base_interval, action)
        assert getattr(get_axis_relation(base_interval, curr), side) is level

    @pytest.mark.unit
    @pytest.mark.parametrize("curr", [Interval(-2, 5), Interval(8, 5), Interval(0, 4), Interval(6, 4)])
    def test_snap_is_stable(self, base_interval: Interval, curr: Interval) -> None:
        """邊緣對齊後再次計算，動作與邊緣皆不變"""
        action = resolve_axis_alignment(base_interval, curr)
        assert action in (A.SNAP_MIN, A.SNAP_MAX)

        align_interval(curr, base_interval, action)
        assert resolve_axis_alignment(base_interval, curr) is action
        if action is A.SNAP_MIN:
            assert curr.min == base_interval.min
        else:
            assert curr.max == base_interval.max

    @pytest.mark.unit
    @pytest.mark.parametrize("curr", [Interval(2, 4), Interval(-5, 20)])
    def test_center_is_stable(self, base_interval: Interval, curr: Interval) -> None:
        align_interval(curr, base_interval, resolve_axis_alignment(base_interval, curr))
        assert curr.mid == base_interval.mid
        assert resolve_axis_alignment(base_interval, curr) is A.CENTER


class TestAlignRect:
    """測試矩形對齊"""

    @pytest.mark.unit
    def test_axes_applied_independently(self) -> None:
        base = Rectangle.from_origin(0, 0, 1440, 900)
        curr = Rectangle.from_origin(1640, -300, 2560, 1440)

        align_rect(curr, base, RectAlignment(x=A.AFTER, y=A.SNAP_MAX))

        assert curr.origin == (1440, -540)
        assert curr.dimensions == (2560, 1440)
        assert base == Rectangle.from_origin(0, 0, 1440, 900)

    @pytest.mark.unit
    def test_center_below(self) -> None:
        """外接螢幕置中放在筆電下方"""
        base = Rectangle.from_origin(0, 0, 1440, 900)
        curr = Rectangle.from_origin(1640, -300, 2560, 1440)

        align_rect(curr, base, RectAlignment(x=A.CENTER, y=A.AFTER))

        assert curr.origin == (-560, 900)
