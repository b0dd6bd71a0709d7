import logging
from pathlib import Path

import pytest
from photosheet.utils.logging_utils import BANNER, QtTailHandler, build_logger, log_section


def test_build_logger_writes_rotating_file(tmp_path: Path):
    logger = build_logger("photosheet.test_build", log_dir=tmp_path)
    logger.info("sheet rendered")
    for h in logger.handlers:
        h.flush()
    assert "sheet rendered" in (tmp_path / "photosheet.log").read_text(encoding="utf-8")
    assert len(logger.handlers) == 2
    # rebuilding does not stack handlers
    assert len(build_logger("photosheet.test_build", log_dir=tmp_path).handlers) == 2


def test_tail_handler_forwards_lines():
    lines = []
    logger = logging.getLogger("photosheet.test_tail")
    logger.setLevel(logging.INFO)
    handler = QtTailHandler(lines.append)
    logger.addHandler(handler)
    try:
        logger.info("printing 8 photos")
    finally:
        logger.removeHandler(handler)
    assert len(lines) == 1 and lines[0].endswith("printing 8 photos")


def test_log_section_banner_and_failure(caplog):
    logger = logging.getLogger("photosheet.test_section")
    caplog.set_level(logging.INFO, logger="photosheet.test_section")
    with pytest.raises(RuntimeError):
        with log_section("BATCH", logger):
            raise RuntimeError("paper jam")
    assert BANNER in caplog.text
    assert "BATCH failed: paper jam" in caplog.text
