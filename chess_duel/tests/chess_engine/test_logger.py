"""
测试日志系统
"""

import logging
import logging.handlers

from chess_duel.src.chess_engine.utils.logger import LoggerMixin, get_logger, setup_logger


class TestSetupLogger:
    """setup_logger的测试"""

    def setup_method(self):
        self.created = []

    def teardown_method(self):
        for name in self.created:
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _setup(self, name, **kwargs):
        self.created.append(name)
        return setup_logger(name=name, **kwargs)

    def test_silent_logger_gets_null_handler(self):
        """测试不输出到控制台也不写文件时只挂NullHandler"""
        logger = self._setup('chess_duel.test_silent', console_output=False)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_file_output(self, tmp_path):
        """测试日志写入轮转文件"""
        logger = self._setup('chess_duel.test_file', level='debug', log_file='game.log',
                             log_dir=str(tmp_path / 'logs'), console_output=False)
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)

        logger.debug("拒绝非法走法: (6,4)->(3,4)")
        for handler in logger.handlers:
            handler.flush()
        content = (tmp_path / 'logs' / 'game.log').read_text(encoding='utf-8')
        assert "拒绝非法走法" in content
        assert "[DEBUG]" in content

    def test_second_call_keeps_configuration(self):
        first = self._setup('chess_duel.test_repeat', console_output=True)
        second = self._setup('chess_duel.test_repeat', console_output=False)
        assert first is second
        assert len(second.handlers) == 1
        assert isinstance(second.handlers[0], logging.StreamHandler)


def test_logger_mixin_name():
    class Dummy(LoggerMixin):
        pass

    assert Dummy().logger is get_logger('chess_duel.Dummy')
