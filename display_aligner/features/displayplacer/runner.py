"""
displayplacer 執行模組

包裝 subprocess 呼叫，將失敗統一轉為 DisplayPlacerError
"""

import logging
import subprocess


logger = logging.getLogger(__name__)


class DisplayPlacerError(RuntimeError):
    """displayplacer 執行失敗"""


class DisplayPlacerRunner:
    """
    displayplacer 執行器

    負責列出螢幕報告與套用新的螢幕配置
    """

    def __init__(self, executable: str = "displayplacer", timeout: float = 10.0) -> None:
        """
        初始化執行器

        Args:
            executable: displayplacer 執行檔路徑
            timeout: 指令逾時秒數
        """
        self.executable = executable
        self.timeout = timeout

    def _run(self, args: list[str]) -> str:
        logger.debug("執行: %s", args)
        try:
            completed = subprocess.run(  # noqa: S603
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except FileNotFoundError as exc:
            msg = f"找不到 displayplacer 執行檔: {args[0]}"
            raise DisplayPlacerError(msg) from exc
        except subprocess.TimeoutExpired as exc:
            msg = f"displayplacer 逾時 ({self.timeout}s)"
            raise DisplayPlacerError(msg) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            msg = f"displayplacer 結束碼 {exc.returncode}: {stderr}"
            raise DisplayPlacerError(msg) from exc
        return completed.stdout

    def list_report(self) -> str:
        """
        取得 `displayplacer list` 報告

        Returns:
            報告全文

        Raises:
            DisplayPlacerError: 指令執行失敗
        """
        return self._run([self.executable, "list"])

    def apply(self, args: list[str]) -> None:
        """
        執行組裝好的配置指令

        Args:
            args: 完整指令（含執行檔）

        Raises:
            DisplayPlacerError: 指令執行失敗
        """
        output = self._run(args)
        if output.strip():
            logger.info("displayplacer: %s", output.strip())
