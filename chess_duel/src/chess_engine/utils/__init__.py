"""
工具模块

包含日志、异常处理和其他通用工具。
"""

from .logger import setup_logger, get_logger, LoggerMixin
from .exceptions import (
    ChessEngineError, OutOfBoundsError, InvalidMoveError,
    GameStateError, ConfigurationError, StatsStoreError
)

__all__ = [
    'setup_logger', 'get_logger', 'LoggerMixin',
    'ChessEngineError', 'OutOfBoundsError', 'InvalidMoveError',
    'GameStateError', 'ConfigurationError', 'StatsStoreError'
]
