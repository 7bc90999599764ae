import logging

from core.logger import APP_LOGGER_NAME, get_logger, set_component_level, setup_logging


def test_get_logger_namespaces_components():
    assert get_logger("generator").name == "fakeiban.generator"
    assert get_logger("fakeiban.validator").name == "fakeiban.validator"
    assert get_logger(APP_LOGGER_NAME).name == "fakeiban"


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging("INFO")
    root = setup_logging("DEBUG")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "fakeiban.log"
    setup_logging("INFO", log_file=log_file)
    get_logger("service").info("batch ready")
    for handler in logging.getLogger(APP_LOGGER_NAME).handlers:
        handler.flush()
    assert "fakeiban.service: batch ready" in log_file.read_text(encoding="utf-8")


def test_component_levels():
    setup_logging("WARNING", component_levels={"bban": "DEBUG"})
    assert get_logger("bban").level == logging.DEBUG
    set_component_level("bban", "nonsense")
    assert get_logger("bban").level == logging.DEBUG
    set_component_level("bban", "NOTSET")
