"""Unit tests for session logger setup."""

import pytest
from loguru import logger

from resumetex.contexts.templating.logger import log_missing_sections, setup_templating_logger
from resumetex.utils.logger import session_details


@pytest.mark.unit
def test_session_details_appends_extra():
    details = session_details({"Data file": "me.yaml"})

    assert list(details)[:4] == ["Script", "Arguments", "Working directory", "Python"]
    assert details["Data file"] == "me.yaml"


@pytest.mark.unit
def test_templating_logger_writes_session_file(tmp_path):
    log_file = setup_templating_logger(tmp_path / "session", data_file="me.yaml")
    log_missing_sections(["Skills"])
    logger.remove()

    content = log_file.read_text()
    assert log_file.name == "template.log"
    assert "Data file: me.yaml" in content
    assert "[template] Missing or incomplete sections: Skills" in content
