"""
幾何工具模組

提供一維區間與二維矩形，作為螢幕對齊運算的基本資料結構
"""

from dataclasses import dataclass


@dataclass(slots=True)
class Interval:
    """
    一維區間（位置 + 長度）

    max 與 mid 為推導值；所有 set_* 方法都只平移區間，不會改變 size。
    size 不做驗證，負值會得到 max < min 的區間

    Attributes:
        min: 起點
        size: 長度
    """

    min: float
    size: float

    @property
    def max(self) -> float:
        """終點"""
        return self.min + self.size

    @property
    def mid(self) -> float:
        """中點"""
        return self.min + self.size / 2

    def set_min(self, new_min: float) -> None:
        """
        平移區間，使起點落在 new_min

        Args:
            new_min: 新的起點
        """
        self.min = new_min

    def set_max_preserving_size(self, new_max: float) -> None:
        """
        平移區間，使終點落在 new_max

        Args:
            new_max: 新的終點
        """
        self.min += new_max - self.max

    def set_mid_preserving_size(self, new_mid: float) -> None:
        """
        平移區間，使中點落在 new_mid

        Args:
            new_mid: 新的中點
        """
        self.min += new_mid - self.mid

    def copy(self) -> "Interval":
        """複製區間"""
        return Interval(self.min, self.size)


@dataclass(slots=True)
class Rectangle:
    """
    軸對齊矩形

    x 與 y 兩軸完全獨立，所有關係判斷與對齊都逐軸進行

    Attributes:
        x: 水平區間
        y: 垂直區間
    """

    x: Interval
    y: Interval

    @classmethod
    def from_origin(
        cls, min_x: float, min_y: float, x_size: float, y_size: float
    ) -> "Rectangle":
        """
        由原點與尺寸建立矩形

        Args:
            min_x: 原點 X
            min_y: 原點 Y
            x_size: 寬度
            y_size: 高度

        Returns:
            新的矩形
        """
        return cls(x=Interval(min_x, x_size), y=Interval(min_y, y_size))

    @property
    def origin(self) -> tuple[float, float]:
        """原點 (x, y)"""
        return self.x.min, self.y.min

    @property
    def dimensions(self) -> tuple[float, float]:
        """尺寸 (寬, 高)"""
        return self.x.size, self.y.size

    def clone(self) -> "Rectangle":
        """深度複製（兩軸區間皆為新物件）"""
        return Rectangle(x=self.x.copy(), y=self.y.copy())
