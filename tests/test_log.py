import logging

import pytest

from throttler.util import log


@pytest.fixture
def logger_name(request):
    name = f"throttler-test-{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_writes_bracketed_level(tmp_path, logger_name):
    logfile = tmp_path / "throttler.log"
    logger = log.configure(debug=True, name=logger_name, logfile=logfile)
    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    line = logfile.read_text().strip()
    assert "[DEBUG]" in line
    assert line.endswith("test_writes_bracketed_level - hello")


def test_unopenable_logfile_falls_back_to_null_handler(tmp_path, logger_name):
    logfile = tmp_path / "is-a-directory"
    logfile.mkdir()
    logger = log.configure(debug=False, name=logger_name, logfile=logfile)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
    logger.info("dropped")


def test_handlers_are_not_added_twice(tmp_path, logger_name):
    logfile = tmp_path / "throttler.log"
    log.configure(debug=False, name=logger_name, logfile=logfile)
    logger = log.configure(debug=True, name=logger_name, logfile=logfile)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG
