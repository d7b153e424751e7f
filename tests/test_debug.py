import re

import pytest

from sheet_viewports.debug import Logger


def test_lines_are_timestamped_and_kept_in_order():
    logger = Logger(enabled=False)
    logger.info("Sheet A contains 1 view: ")
    logger.warn("viewport not resolved")
    logger.error("Sheet 10 failed: boom")

    lines = logger.dump()
    assert len(lines) == 3
    assert re.match(r"^\[\d\d:\d\d:\d\d\] INFO: Sheet A contains 1 view: $", lines[0])
    assert lines[1].endswith("WARN: viewport not resolved")
    assert lines[2].endswith("ERROR: Sheet 10 failed: boom")


def test_report_is_bare_info_text():
    logger = Logger(enabled=False)
    logger.info("Sheet A contains 1 view: ")
    logger.warn("skipped")
    logger.info("  1 View B bb <null> outline <null>")

    assert logger.report() == "Sheet A contains 1 view: \n  1 View B bb <null> outline <null>"
    assert logger.messages("WARN") == ["skipped"]
    assert logger.num("INFO") == 2


def test_echo_prints_formatted_line(capsys):
    Logger(enabled=True).info("hello")
    assert capsys.readouterr().out.rstrip().endswith("INFO: hello")


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        Logger(enabled=False).log("TRACE", "x")