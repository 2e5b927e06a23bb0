"""
Logger Tests

로깅 설정 및 유틸리티 테스트
"""
import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from branch_committers.utils.logger import (
    LOGGER_NAME,
    LogContext,
    get_logger,
    log_execution_time,
    setup_logger,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogger:
    """setup_logger 테스트 클래스"""

    def test_logs_go_to_stderr(self, capsys):
        """로그가 stdout이 아닌 stderr로 출력되는지 테스트"""
        setup_logger("INFO")

        get_logger("tests").info("to stderr")
        captured = capsys.readouterr()

        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_single_rich_handler_after_repeated_setup(self):
        """반복 설정 시 핸들러가 중복되지 않는지 테스트"""
        setup_logger("INFO")
        logger = setup_logger("DEBUG")

        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.console.stderr
        assert handler.level == logging.DEBUG

    def test_console_level_filters(self):
        """콘솔 로그 레벨 필터링 테스트"""
        buffer = io.StringIO()
        setup_logger("WARNING", log_console=Console(file=buffer, width=120))

        logger = get_logger("tests")
        logger.info("quiet message")
        logger.warning("loud message")

        assert "quiet message" not in buffer.getvalue()
        assert "loud message" in buffer.getvalue()

    def test_log_file_records_debug(self, tmp_path):
        """로그 파일에는 콘솔 레벨과 무관하게 DEBUG까지 기록되는지 테스트"""
        buffer = io.StringIO()
        log_file = tmp_path / "logs" / "report.log"

        logger = setup_logger("WARNING", log_file=log_file, log_console=Console(file=buffer, width=120))
        get_logger("tests").debug("history query details")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "branch_committers.tests - DEBUG" in content
        assert "history query details" in content
        assert "history query details" not in buffer.getvalue()

    def test_unknown_level(self):
        """알 수 없는 로그 레벨은 ValueError 발생 테스트"""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logger("LOUD")


class TestLoggerHelpers:
    """get_logger / log_execution_time / LogContext 테스트 클래스"""

    @pytest.mark.parametrize("name, expected", [
        (None, "branch_committers"),
        ("branch_committers", "branch_committers"),
        ("branch_committers.core.report", "branch_committers.core.report"),
        ("tests", "branch_committers.tests"),
    ])
    def test_get_logger_names(self, name, expected):
        """하위 로거 이름에 패키지 접두사가 한 번만 붙는지 테스트"""
        assert get_logger(name).name == expected

    def test_log_execution_time(self, caplog):
        """실행 시간 로깅 및 예외 재발생 테스트"""
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

        @log_execution_time
        def succeed():
            return 42

        @log_execution_time
        def fail():
            raise RuntimeError("boom")

        assert succeed() == 42
        with pytest.raises(RuntimeError, match="boom"):
            fail()

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("succeed completed in") for m in messages)
        assert any(m.startswith("fail failed after") and m.endswith("boom") for m in messages)

    def test_log_context(self, caplog):
        """LogContext 시작/완료/실패 로깅 테스트"""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        logger = get_logger("tests")

        with LogContext("first report", logger):
            pass
        with pytest.raises(ValueError):
            with LogContext("second report", logger):
                raise ValueError("bad range")

        messages = [r.getMessage() for r in caplog.records]
        assert "Starting first report" in messages
        assert any(m.startswith("Completed first report") for m in messages)
        assert any(m.startswith("Failed second report") and m.endswith("bad range") for m in messages)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
