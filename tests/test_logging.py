"""Tests for render_engine.utils.logging."""
import io
import logging
from datetime import date

import pytest

from render_engine.utils.logging import (
    ROOT_LOGGER_NAME,
    LevelColorFormatter,
    StageTimer,
    default_log_file,
    setup_logging,
)


class TestSetupLogging:
    def test_console_and_file_handlers(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "run.log"
        stream = io.StringIO()

        logger = setup_logging("WARNING", log_file=str(log_file), stream=stream)
        logging.getLogger("render_engine.layout.layout").info("laid out root box")
        for handler in logger.handlers:
            handler.flush()

        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert stream.getvalue() == ""
        assert "laid out root box" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging(stream=io.StringIO())
        logger = setup_logging(stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        logger = setup_logging("chatty", stream=io.StringIO())
        assert logger.handlers[0].level == logging.INFO

    def test_level_names_are_case_insensitive(self) -> None:
        logger = setup_logging("debug", stream=io.StringIO())
        assert logger.level == logging.DEBUG

    def test_no_colors_when_stream_is_not_a_terminal(self) -> None:
        stream = io.StringIO()
        logger = setup_logging(stream=stream)
        logger.warning("careful")
        assert "\033[" not in stream.getvalue()
        assert "[WARNING] render_engine: careful" in stream.getvalue()


class TestLevelColorFormatter:
    def _record(self, level: int) -> logging.LogRecord:
        return logging.LogRecord("render_engine.css", level, __file__, 1, "msg", None, None)

    def test_colors_level_name(self) -> None:
        formatter = LevelColorFormatter(colored=True, fmt="%(levelname)s %(message)s")
        assert formatter.format(self._record(logging.ERROR)) == "\033[31mERROR\033[0m msg"

    def test_record_is_left_unchanged(self) -> None:
        record = self._record(logging.INFO)
        LevelColorFormatter(colored=True).format(record)
        assert record.levelname == "INFO"

    def test_plain_output(self) -> None:
        formatter = LevelColorFormatter(colored=False, fmt="%(levelname)s %(message)s")
        assert formatter.format(self._record(logging.INFO)) == "INFO msg"


def test_default_log_file_is_dated() -> None:
    path = default_log_file(date(2024, 3, 9))
    assert path.endswith("render_engine_2024-03-09.log")
    assert ".render_engine" in path


class TestStageTimer:
    def test_records_stages_in_order(self, caplog) -> None:
        timer = StageTimer(logging.getLogger("render_engine.core"))

        with caplog.at_level(logging.DEBUG, logger="render_engine.core"):
            with timer.stage("parse_css"):
                pass
            with timer.stage("layout"):
                pass

        assert list(timer.durations) == ["parse_css", "layout"]
        assert "Stage layout took" in caplog.text

    def test_failed_stage_is_still_recorded(self) -> None:
        timer = StageTimer(logging.getLogger("render_engine.core"))
        with pytest.raises(ValueError):
            with timer.stage("paint"):
                raise ValueError("bad")
        assert "paint" in timer.durations

    def test_summary_and_reset(self) -> None:
        timer = StageTimer(logging.getLogger("render_engine.core"))
        timer.durations = {"style": 0.002, "layout": 0.001}

        assert timer.summary() == "style 2.00 ms, layout 1.00 ms (total 3.00 ms)"

        timer.reset()
        assert timer.durations == {}
