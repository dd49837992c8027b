"""
對齊計畫顯示模組

使用 rich 表格呈現螢幕、兩軸關係與對齊結果
"""

from rich.console import Console
from rich.table import Table

from display_aligner.data_model import AlignmentPlan, Display
from display_aligner.features.alignment import AxisRelation


def _format_number(value: float) -> str:
    return f"{value:g}"


def _format_relation(relation: AxisRelation) -> str:
    return f"{relation.min_side.name} / {relation.max_side.name}"


def build_displays_table(displays: list[Display]) -> Table:
    """
    建立螢幕列表表格

    Args:
        displays: 螢幕列表

    Returns:
        rich 表格
    """
    table = Table(title="Displays")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Resolution")
    table.add_column("Origin")
    table.add_column("Rotation", justify="right")

    for index, display in enumerate(displays):
        table.add_row(
            str(index),
            display.label,
            f"{display.width}x{display.height}",
            f"({display.origin[0]},{display.origin[1]})",
            _format_number(display.rotation),
        )
    return table


def build_plan_table(plan: AlignmentPlan) -> Table:
    """
    建立對齊計畫表格（每軸一列）

    Args:
        plan: 對齊計畫

    Returns:
        rich 表格
    """
    table = Table(title=f"{plan.current.label} → {plan.base.label}")
    table.add_column("Axis")
    table.add_column("Relation (min / max)")
    table.add_column("Action", style="bold")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")

    before = plan.current.to_rect()
    for axis, relation, action, old, new in (
        ("x", plan.relation.x, plan.alignment.x, before.x.min, plan.aligned.x.min),
        ("y", plan.relation.y, plan.alignment.y, before.y.min, plan.aligned.y.min),
    ):
        table.add_row(
            axis,
            _format_relation(relation),
            str(action),
            _format_number(old),
            _format_number(new),
        )
    return table


def render_plan(
    plan: AlignmentPlan,
    displays: list[Display],
    console: Console | None = None,
) -> None:
    """
    輸出螢幕列表與對齊計畫

    Args:
        plan: 對齊計畫
        displays: 螢幕列表
        console: rich Console（預設輸出到 stdout）
    """
    console = console or Console()
    console.print(build_displays_table(displays))
    console.print(build_plan_table(plan))
    if not plan.moved:
        console.print("[yellow]已對齊，位置不需變動[/yellow]")
