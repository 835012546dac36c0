"""
Tests for the run-level helpers in smsspam.utils.training_utils:
train config loading, log level parsing, log file naming and loggers.
"""

from __future__ import annotations

import logging
import os
import random

import numpy as np
import pytest

from smsspam.utils.training_utils import (
    get_logger,
    load_train_config,
    log_file_path,
    parse_log_level,
    seed_everything,
)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def test_load_train_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_train_config(os.path.join(str(tmp_path), "nope.yaml"))


def test_load_train_config_empty_file(tmp_path):
    path = tmp_path / "train.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_train_config(str(path))


def test_shipped_train_config_has_logging_section():
    cfg = load_train_config("config/train.yaml")
    assert cfg["logging"]["file_prefix"] == "spam_filter"
    assert "logs_dir" in cfg["paths"]


def test_seed_everything_makes_rngs_repeatable():
    seed_everything(7)
    first = (random.random(), np.random.rand())
    seed_everything(7)
    assert (random.random(), np.random.rand()) == first


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("chatty", logging.INFO),
        (None, logging.INFO),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_parse_log_level(level, expected):
    assert parse_log_level(level) == expected


def test_log_file_path_uses_prefix_and_suffix():
    cfg = {"paths": {"logs_dir": "out"}, "logging": {"file_prefix": "sms"}}
    assert log_file_path(cfg, "pipeline_svm") == os.path.join("out", "sms_pipeline_svm.log")
    assert log_file_path(cfg) == os.path.join("out", "sms.log")
    assert log_file_path({}, "run") == os.path.join(
        "experiments", "logs", "spam_filter_run.log"
    )


def test_get_logger_writes_file_and_is_configured_once(tmp_path):
    logs_dir = os.path.join(str(tmp_path), "nested", "logs")
    cfg = {
        "paths": {"logs_dir": logs_dir},
        "logging": {"level": "INFO", "to_file": True},
    }
    logger = get_logger("smsspam.tests.file_logger", cfg, log_file_suffix="unit")
    try:
        assert get_logger("smsspam.tests.file_logger", cfg, "unit") is logger
        assert len(logger.handlers) == 2
        assert logger.propagate is False

        logger.info("hello from the test")
        for handler in logger.handlers:
            handler.flush()

        with open(os.path.join(logs_dir, "spam_filter_unit.log"), encoding="utf-8") as f:
            assert "hello from the test" in f.read()
    finally:
        _close_handlers(logger)


def test_get_logger_console_only(tmp_path):
    logs_dir = os.path.join(str(tmp_path), "logs")
    cfg = {
        "paths": {"logs_dir": logs_dir},
        "logging": {"level": "ERROR", "to_file": False},
    }
    logger = get_logger("smsspam.tests.console_logger", cfg)
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR
        assert not os.path.exists(logs_dir)
    finally:
        _close_handlers(logger)
