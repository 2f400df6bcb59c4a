"""
走法数据结构

定义走法的表示和坐标校验。
"""

from dataclasses import dataclass
from typing import Any, Tuple

from ..utils.exceptions import OutOfBoundsError

BOARD_SIZE = 8

Square = Tuple[int, int]


def validate_square(pos: Any) -> Square:
    """
    校验并规范化坐标

    Args:
        pos: (行, 列) 坐标

    Returns:
        Square: 规范化后的 (int, int) 坐标

    Raises:
        OutOfBoundsError: 坐标不在 [0, 7] 范围内或格式错误
    """
    try:
        row, col = pos
        row, col = int(row), int(col)
    except (TypeError, ValueError):
        raise OutOfBoundsError(pos)
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise OutOfBoundsError(pos)
    return row, col


@dataclass(frozen=True)
class Move:
    """
    走法类

    只包含起始位置和目标位置, 是一个纯粹的变换请求。
    """
    from_pos: Square  # 起始位置 (行, 列)
    to_pos: Square    # 目标位置 (行, 列)

    def __post_init__(self):
        """初始化后验证坐标有效性"""
        object.__setattr__(self, 'from_pos', validate_square(self.from_pos))
        object.__setattr__(self, 'to_pos', validate_square(self.to_pos))

    @property
    def row_delta(self) -> int:
        return self.to_pos[0] - self.from_pos[0]

    @property
    def col_delta(self) -> int:
        return self.to_pos[1] - self.from_pos[1]

    def reversed(self) -> 'Move':
        """返回反向走法"""
        return Move(self.to_pos, self.from_pos)

    def __str__(self) -> str:
        return f"{self.from_pos}->{self.to_pos}"

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'from_pos': list(self.from_pos),
            'to_pos': list(self.to_pos)
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Move':
        """从字典创建Move对象"""
        return cls(
            from_pos=tuple(data['from_pos']),
            to_pos=tuple(data['to_pos'])
        )
