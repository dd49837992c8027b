"""
應用程式設定

使用 Pydantic BaseSettings 管理環境變數和配置
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    應用程式設定

    從環境變數和 .env 文件讀取設定

    Attributes:
        log_level: 日誌級別 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        displayplacer_path: displayplacer 執行檔
        command_timeout: 指令逾時秒數
        base_index: 基準螢幕在報告中的索引
        current_index: 要移動的螢幕在報告中的索引
        dry_run: 只顯示指令，不實際套用
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DISPLAY_ALIGN_",
        case_sensitive=False,
    )

    # 日誌設定
    log_level: str = "INFO"

    # displayplacer 設定
    displayplacer_path: str = "displayplacer"
    command_timeout: float = Field(default=10.0, gt=0)

    # 螢幕選擇
    base_index: int = Field(default=0, ge=0)
    current_index: int = Field(default=1, ge=0)

    dry_run: bool = False
