import io
import logging

import pytest

from flightfilter.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_plain_format_to_stream():
    stream = io.StringIO()
    setup_logging("debug", stream=stream)
    logging.getLogger("flightfilter.test").debug("kept %d flights", 3)
    line = stream.getvalue()
    assert "[DEBUG] flightfilter.test" in line
    assert "kept 3 flights" in line


def test_setup_logging_twice_keeps_single_handler():
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    setup_logging(logging.INFO, stream=stream)
    logging.info("once")
    assert stream.getvalue().count("once") == 1


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("loud")


def test_setup_logging_leaves_foreign_handlers_alone():
    foreign = logging.StreamHandler(io.StringIO())
    logging.getLogger().addHandler(foreign)
    setup_logging(logging.INFO, stream=io.StringIO())
    setup_logging(logging.INFO, stream=io.StringIO())
    assert foreign in logging.getLogger().handlers
