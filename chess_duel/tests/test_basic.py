"""
基础测试模块

测试项目的基本功能和导入。
"""

import pytest


def test_project_import():
    """测试项目主模块是否可以正常导入"""
    try:
        import chess_duel
        assert chess_duel.__version__ == "0.1.0"
        assert chess_duel.__author__ == "Chess Duel Team"
    except ImportError as e:
        pytest.fail(f"无法导入chess_duel模块: {e}")


def test_submodules_import():
    """测试子模块是否可以正常导入"""
    from chess_duel.src import chess_engine

    assert chess_engine.__version__ == "0.1.0"
    for name in ("is_legal_move", "choose_move", "apply_move", "initial_board"):
        assert callable(getattr(chess_engine, name))


def test_core_functions_together():
    """测试核心函数的组合调用"""
    from chess_duel.src.chess_engine import (
        Color, Move, apply_move, choose_move, initial_board, is_legal_move
    )
    import random

    board = initial_board()
    assert is_legal_move(board, (6, 4), (4, 4))
    board = apply_move(board, Move((6, 4), (4, 4)))

    move = choose_move(board, Color.BLACK, random.Random(0))
    assert is_legal_move(board, move.from_pos, move.to_pos)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
