"""
日志系统

项目内所有日志记录器都挂在 "chess_duel" 之下, 由 setup_logger 统一配置输出位置。
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

ROOT_LOGGER_NAME = 'chess_duel'

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(log_file: Optional[str], log_dir: str, max_size: int,
                    backup_count: int, console_output: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        # 按大小轮转
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=log_path / log_file,
            maxBytes=max_size * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        ))

    if not handlers:
        # 对局中的警告不应落到 logging 的 lastResort 输出到终端
        handlers.append(logging.NullHandler())

    return handlers


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: str = 'logs',
    max_size: int = 10,  # MB
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    配置日志记录器, 重复调用时保留第一次的配置

    Args:
        name: 日志记录器名称
        level: 日志级别名称, 如 'INFO'
        log_file: 日志文件名, 为空时不写文件
        log_dir: 日志目录
        max_size: 单个日志文件最大大小(MB)
        backup_count: 轮转保留的文件数量
        console_output: 是否输出到标准输出

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file, log_dir, max_size, backup_count, console_output):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)


class LoggerMixin:
    """为类提供以类名命名的子日志记录器, 如 chess_duel.GameSession"""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(f'{ROOT_LOGGER_NAME}.{self.__class__.__name__}')
