"""
Run-level helpers shared by the pipeline and the CLI script.

- config/train.yaml loading
- seeding of the Python and NumPy RNGs
- loggers writing to the console and, when enabled, to a per-run file
  under paths.logs_dir (e.g. "spam_filter_pipeline_svm.log")
"""

from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, List, Optional

import numpy as np
import yaml


DEFAULT_TRAIN_CONFIG_PATH = "config/train.yaml"
DEFAULT_LOGS_DIR = "experiments/logs"
DEFAULT_LOG_FILE_PREFIX = "spam_filter"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def load_train_config(
    config_path: str = DEFAULT_TRAIN_CONFIG_PATH,
) -> Dict[str, Any]:
    """
    Read config/train.yaml.

    Raises
    ------
    FileNotFoundError
        If the file is missing.
    ValueError
        If the file is empty or does not hold a mapping.
    """
    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"Train config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if not isinstance(cfg, dict):
        raise ValueError(f"Train config must be a non-empty mapping: {config_path}")
    return cfg


def seed_everything(seed: int = 42) -> None:
    random.seed(seed)
    np.random.seed(seed)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def parse_log_level(level: Any) -> int:
    """Map "debug"/"INFO"/... (or an int) to a logging level; INFO otherwise."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def log_file_path(config: Dict[str, Any], suffix: Optional[str] = None) -> str:
    """
    Path of the log file for one run: <logs_dir>/<prefix>[_<suffix>].log.

    Parameters
    ----------
    config : Dict[str, Any]
        Global training configuration ("paths" and "logging" sections).
    suffix : Optional[str]
        Run tag, e.g. "pipeline_svm" or "run".
    """
    logs_dir = (config.get("paths", {}) or {}).get("logs_dir", DEFAULT_LOGS_DIR)
    prefix = (config.get("logging", {}) or {}).get(
        "file_prefix", DEFAULT_LOG_FILE_PREFIX
    )
    stem = f"{prefix}_{suffix}" if suffix else str(prefix)
    return os.path.join(logs_dir, f"{stem}.log")


def _build_handlers(
    config: Dict[str, Any], log_file_suffix: Optional[str]
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if bool((config.get("logging", {}) or {}).get("to_file", True)):
        path = log_file_path(config, log_file_suffix)
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    return handlers


def get_logger(
    name: str,
    config: Dict[str, Any],
    log_file_suffix: Optional[str] = None,
) -> logging.Logger:
    """
    Return the named logger, configured from the "logging" section of the
    training config on first use.

    Parameters
    ----------
    name : str
        Logger name.
    config : Dict[str, Any]
        Global training configuration.
    log_file_suffix : Optional[str]
        Run tag appended to the log file name, see `log_file_path`.

    Returns
    -------
    logging.Logger
        The logger. One that already has handlers is returned as is, so
        repeated calls never duplicate output.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = parse_log_level((config.get("logging", {}) or {}).get("level", "INFO"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    for handler in _build_handlers(config, log_file_suffix):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
