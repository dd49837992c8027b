"""
核心資料模型

Display 使用 Pydantic 驗證外部輸入（displayplacer 報告）；
對齊計畫為內部運算結果，使用 dataclass
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from display_aligner.features.alignment import RectAlignment, RectRelation
from display_aligner.utils.geometry import Rectangle


class Display(BaseModel):
    """
    螢幕資訊

    Attributes:
        id: 持久螢幕 ID (Persistent screen id)
        resolution: 解析度 (寬, 高)
        origin: 原點 (x, y)，可為負值
        rotation: 旋轉角度
        raw: 報告中的原始欄位（值已去除前後空白）
    """

    model_config = ConfigDict(frozen=True)

    id: str
    resolution: tuple[NonNegativeInt, NonNegativeInt]
    origin: tuple[int, int]
    rotation: float = 0.0
    raw: dict[str, str] = Field(default_factory=dict)

    @property
    def width(self) -> int:
        """寬度"""
        return self.resolution[0]

    @property
    def height(self) -> int:
        """高度"""
        return self.resolution[1]

    @property
    def label(self) -> str:
        """顯示用名稱（優先使用 Type 欄位）"""
        return self.raw.get("Type", self.id)

    def to_rect(self) -> Rectangle:
        """轉換為矩形"""
        min_x, min_y = self.origin
        return Rectangle.from_origin(min_x, min_y, self.width, self.height)


@dataclass(frozen=True, slots=True)
class AlignmentPlan:
    """
    對齊計畫

    Attributes:
        base: 基準螢幕
        current: 要移動的螢幕
        relation: 移動前的兩軸關係
        alignment: 採用的兩軸對齊動作
        aligned: 對齊後的目前螢幕矩形
    """

    base: Display
    current: Display
    relation: RectRelation
    alignment: RectAlignment
    aligned: Rectangle

    @property
    def moved(self) -> bool:
        """原點是否有變動"""
        return self.aligned.origin != tuple(self.current.origin)
