import logging

import pytest

from arch_installer import logging_utils


@pytest.fixture
def fresh_root_logger(monkeypatch):
    monkeypatch.setattr(logging_utils, "_active_log_path", None)
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def _record(level):
    return logging.LogRecord("arch_installer.test", level, __file__, 1, "message", None, None)


def test_console_shows_warnings_but_not_errors(fresh_root_logger, tmp_path):
    before = set(fresh_root_logger.handlers)
    logging_utils.configure_logging(str(tmp_path / "install.log"))

    added = [h for h in fresh_root_logger.handlers if h not in before]
    console = next(h for h in added if not isinstance(h, logging.FileHandler))

    assert console.level == logging.WARNING
    assert console.filter(_record(logging.WARNING))
    assert not console.filter(_record(logging.ERROR))


def test_file_receives_everything_from_info(fresh_root_logger, tmp_path):
    log_path = tmp_path / "logs" / "install.log"

    assert logging_utils.configure_logging(str(log_path)) == str(log_path)
    logging.getLogger("arch_installer.test").error("step 40_format failed")

    assert "step 40_format failed" in log_path.read_text()


def test_second_call_keeps_first_handlers(fresh_root_logger, tmp_path):
    first = logging_utils.configure_logging(str(tmp_path / "a.log"))
    count = len(fresh_root_logger.handlers)

    assert logging_utils.configure_logging(str(tmp_path / "b.log")) == first
    assert len(fresh_root_logger.handlers) == count
