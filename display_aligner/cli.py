"""
命令列介面

使用方法:
    display-aligner --dry-run
    display-aligner --base 0 --current 1 --x center --y after
    display-aligner --report saved_list.txt --dry-run
"""

import argparse
import logging
from pathlib import Path

from rich.console import Console

from display_aligner.app import AlignmentService
from display_aligner.features.alignment import AlignmentAction
from display_aligner.features.displayplacer import format_shell_command
from display_aligner.settings import AppSettings
from display_aligner.ui import render_plan


logger = logging.getLogger(__name__)

_ACTION_CHOICES = [action.value for action in AlignmentAction]


def build_parser() -> argparse.ArgumentParser:
    """建立參數解析器"""
    parser = argparse.ArgumentParser(
        prog="display-aligner",
        description="將一個螢幕貼齊到另一個螢幕（透過 displayplacer）",
    )
    parser.add_argument("--base", type=int, default=None, help="基準螢幕索引")
    parser.add_argument("--current", type=int, default=None, help="要移動的螢幕索引")
    parser.add_argument(
        "--x", choices=_ACTION_CHOICES, default=None, help="強制指定 X 軸對齊動作"
    )
    parser.add_argument(
        "--y", choices=_ACTION_CHOICES, default=None, help="強制指定 Y 軸對齊動作"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="只顯示指令，不套用",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="讀取已存檔的 displayplacer list 輸出，而非即時執行",
    )
    parser.add_argument("--log-level", default=None, help="日誌級別（覆寫設定）")
    return parser


def _optional_action(value: str | None) -> AlignmentAction | None:
    return None if value is None else AlignmentAction(value)


def _resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {name!r}"
        raise ValueError(msg)
    return level


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """
    主程式

    Returns:
        退出碼 (0: 成功, 1: 失敗, 130: 中斷)
    """
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        settings = AppSettings()
        logging.basicConfig(
            level=_resolve_log_level(args.log_level or settings.log_level),
            format="%(levelname)s %(name)s: %(message)s",
        )

        service = AlignmentService(settings=settings)
        report = None
        if args.report is not None:
            report = args.report.read_text(encoding="utf-8")

        displays = service.load_displays(report)
        plan = service.plan(
            displays,
            base_index=args.base,
            current_index=args.current,
            x=_optional_action(args.x),
            y=_optional_action(args.y),
        )
        render_plan(plan, displays, console=console)

        command = service.apply(plan, dry_run=args.dry_run)
        console.print(format_shell_command(command), markup=False, highlight=False)

    except KeyboardInterrupt:
        console.print("\n已中斷操作")
        return 130

    except Exception as exc:
        console.print(f"錯誤: {exc}", markup=False)
        logger.exception("對齊時發生錯誤")
        return 1

    return 0
