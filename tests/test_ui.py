"""Tests for output helpers and logger setup."""

import io
import logging

from termcore.ui import colorize, init_logger, print_line, strip_ansi


class TestAnsi:
    def test_colorize_and_strip(self):
        text = colorize("ok", "green", "bold")
        assert text != "ok"
        assert strip_ansi(text) == "ok"

    def test_unknown_style_is_plain(self):
        assert colorize("ok", "sparkly") == "ok"

    def test_print_line_strips_off_tty(self):
        buf = io.StringIO()
        print_line(colorize("[  OK  ] step", "green"), file=buf)
        assert buf.getvalue() == "[  OK  ] step\n"


class TestInitLogger:
    def test_file_handler_writes_plain_text(self, tmp_path):
        logfile = tmp_path / "logs" / "termcore.log"
        logger = init_logger("termcore-ui-test", level="ERROR", logfile=logfile)
        try:
            logger.debug(colorize("detail", "red"))
            for handler in logger.handlers:
                handler.flush()
            content = logfile.read_text(encoding="utf-8")
            assert "[DEBUG] termcore-ui-test: detail" in content
            assert "\x1b[" not in content
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_handlers_not_duplicated(self):
        logger = init_logger("termcore-ui-dup")
        try:
            init_logger("termcore-ui-dup")
            assert len(logger.handlers) == 1
            assert logger.level == logging.WARNING
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
