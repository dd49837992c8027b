"""
應用程式服務層

協調報告讀取、對齊運算與指令套用
"""

import logging

from display_aligner.data_model import AlignmentPlan, Display
from display_aligner.features.alignment import (
    AlignmentAction,
    align_rect,
    get_rect_relation,
    resolve_rect_alignment,
)
from display_aligner.features.displayplacer import (
    DisplayPlacerRunner,
    build_command,
    format_shell_command,
    parse_display_report,
)
from display_aligner.settings import AppSettings


logger = logging.getLogger(__name__)


class AlignmentService:
    """
    對齊服務

    runner 可注入，測試時以假物件取代實際的 displayplacer
    """

    def __init__(
        self,
        runner: DisplayPlacerRunner | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        """
        初始化對齊服務

        Args:
            runner: displayplacer 執行器（預設依設定建立）
            settings: 應用程式設定
        """
        self.settings = settings or AppSettings()
        self.runner = runner or DisplayPlacerRunner(
            executable=self.settings.displayplacer_path,
            timeout=self.settings.command_timeout,
        )

    def load_displays(self, report: str | None = None) -> list[Display]:
        """
        讀取螢幕列表

        Args:
            report: 已存在的報告文字；None 時執行 displayplacer list

        Returns:
            螢幕列表
        """
        if report is None:
            report = self.runner.list_report()
        displays = parse_display_report(report)
        logger.info("偵測到 %d 個螢幕", len(displays))
        return displays

    def plan(
        self,
        displays: list[Display],
        base_index: int | None = None,
        current_index: int | None = None,
        x: AlignmentAction | None = None,
        y: AlignmentAction | None = None,
    ) -> AlignmentPlan:
        """
        建立對齊計畫

        輸入的 Display 不會被修改，對齊結果存放在計畫的 aligned 矩形

        Args:
            displays: 螢幕列表
            base_index: 基準螢幕索引（預設取自設定）
            current_index: 要移動的螢幕索引（預設取自設定）
            x: 強制指定 X 軸動作
            y: 強制指定 Y 軸動作

        Returns:
            對齊計畫

        Raises:
            ValueError: 索引超出範圍或兩者相同
        """
        if base_index is None:
            base_index = self.settings.base_index
        if current_index is None:
            current_index = self.settings.current_index

        count = len(displays)
        for name, index in (("base", base_index), ("current", current_index)):
            if not 0 <= index < count:
                msg = f"{name} index {index} is out of range ({count} displays)"
                raise ValueError(msg)
        if base_index == current_index:
            msg = f"base and current must be different displays (both {base_index})"
            raise ValueError(msg)

        base = displays[base_index]
        current = displays[current_index]
        base_rect = base.to_rect()
        current_rect = current.to_rect()

        relation = get_rect_relation(base_rect, current_rect)
        alignment = resolve_rect_alignment(base_rect, current_rect).with_overrides(
            x=x, y=y
        )

        aligned = current_rect.clone()
        align_rect(aligned, base_rect, alignment)

        logger.info(
            "對齊 %s -> %s: x=%s, y=%s, origin %s -> %s",
            current.label,
            base.label,
            alignment.x,
            alignment.y,
            current.origin,
            aligned.origin,
        )
        return AlignmentPlan(
            base=base,
            current=current,
            relation=relation,
            alignment=alignment,
            aligned=aligned,
        )

    def apply(self, plan: AlignmentPlan, dry_run: bool | None = None) -> list[str]:
        """
        套用對齊計畫

        Args:
            plan: 對齊計畫
            dry_run: 只組裝指令不執行（預設取自設定）

        Returns:
            組裝好的指令參數
        """
        if dry_run is None:
            dry_run = self.settings.dry_run

        args = build_command(self.runner.executable, plan.current, plan.aligned)
        logger.info("指令: %s", format_shell_command(args))

        if dry_run:
            logger.info("Dry run，未套用配置")
        else:
            self.runner.apply(args)
        return args
