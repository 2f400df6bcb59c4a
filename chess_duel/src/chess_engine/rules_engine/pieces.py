"""
棋子定义

定义棋子颜色、棋子种类以及棋子值对象，并提供与棋盘矩阵整数编码之间的转换。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    """棋子颜色枚举"""
    WHITE = "white"   # 先手 (人类玩家)
    BLACK = "black"   # 后手 (电脑)

    @property
    def opponent(self) -> 'Color':
        """对方颜色"""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def sign(self) -> int:
        """矩阵编码中的符号 (白方为正, 黑方为负)"""
        return 1 if self is Color.WHITE else -1

    @property
    def forward(self) -> int:
        """兵的前进方向 (第0行是黑方底线)"""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        """兵的起始行"""
        return 6 if self is Color.WHITE else 1

    @property
    def back_row(self) -> int:
        """底线所在行"""
        return 7 if self is Color.WHITE else 0


class PieceKind(Enum):
    """棋子种类枚举, 值即矩阵编码的绝对值"""
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


# 棋子的Unicode符号
PIECE_SYMBOLS = {
    Color.WHITE: {
        PieceKind.KING: '♔', PieceKind.QUEEN: '♕', PieceKind.ROOK: '♖',
        PieceKind.BISHOP: '♗', PieceKind.KNIGHT: '♘', PieceKind.PAWN: '♙'
    },
    Color.BLACK: {
        PieceKind.KING: '♚', PieceKind.QUEEN: '♛', PieceKind.ROOK: '♜',
        PieceKind.BISHOP: '♝', PieceKind.KNIGHT: '♞', PieceKind.PAWN: '♟'
    }
}


@dataclass(frozen=True)
class Piece:
    """
    棋子值对象

    不可变, 只包含种类和颜色。
    """
    kind: PieceKind
    color: Color

    @property
    def code(self) -> int:
        """棋盘矩阵中的整数编码"""
        return self.color.sign * self.kind.value

    @property
    def symbol(self) -> str:
        """Unicode符号"""
        return PIECE_SYMBOLS[self.color][self.kind]

    @property
    def is_sliding(self) -> bool:
        """是否为需要检查路径的长距离棋子"""
        return self.kind in (PieceKind.ROOK, PieceKind.BISHOP, PieceKind.QUEEN)

    @classmethod
    def from_code(cls, code: int) -> Optional['Piece']:
        """
        从整数编码创建棋子

        Args:
            code: 矩阵编码, 0表示空

        Returns:
            Optional[Piece]: 棋子, 空格返回None
        """
        code = int(code)
        if code == 0:
            return None
        color = Color.WHITE if code > 0 else Color.BLACK
        return cls(PieceKind(abs(code)), color)

    def __str__(self) -> str:
        return f"{self.color.value} {self.kind.name.lower()}"
