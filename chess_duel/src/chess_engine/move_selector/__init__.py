"""
走法选择模块

电脑一方的选步策略。
"""

from .selector import MoveSelector, RandomMoveSelector, choose_move

__all__ = ['MoveSelector', 'RandomMoveSelector', 'choose_move']
