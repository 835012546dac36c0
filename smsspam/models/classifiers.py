"""
Classifier builders for the bag-of-words spam filter.

This module constructs the scikit-learn estimator that consumes the
binary feature vectors:

- Support Vector Machine (SVM, linear kernel by default)
- Bernoulli Naive Bayes (NB), a natural fit for 0/1 features
- Logistic Regression (LR)

Which one is used, and its hyperparameters, are read from
config/classifier.yaml. Targets are encoded as +1 (spam) / -1 (ham).
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict

import yaml
from sklearn.linear_model import LogisticRegression
from sklearn.naive_bayes import BernoulliNB
from sklearn.svm import SVC


DEFAULT_CLASSIFIER_CONFIG_PATH = "config/classifier.yaml"


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------


def load_classifier_config(
    config_path: str = DEFAULT_CLASSIFIER_CONFIG_PATH,
) -> Dict[str, Any]:
    """
    Load and return the classifier configuration dictionary.

    Parameters
    ----------
    config_path : str
        Path to the classifier YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Parsed configuration with "general" and "classifiers" sections.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file is empty or cannot be parsed.
    KeyError
        If required sections are missing.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Classifier config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        raise ValueError(f"Classifier config file is empty or invalid: {config_path}")

    for section in ("general", "classifiers"):
        if section not in cfg:
            raise KeyError(
                f'Missing "{section}" section in classifier config: {config_path}'
            )

    return cfg


# ---------------------------------------------------------------------------
# Model builder helpers
# ---------------------------------------------------------------------------


def _class_weight_or_none(cfg: Dict[str, Any]) -> Any:
    use_balanced = bool(cfg["general"].get("use_class_weight_balanced", False))
    return "balanced" if use_balanced else None


def _model_cfg(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    return (cfg.get("classifiers", {}) or {}).get(name, {}) or {}


def build_svm(cfg: Dict[str, Any]) -> SVC:
    mcfg = _model_cfg(cfg, "svm")
    return SVC(
        kernel=str(mcfg.get("kernel", "linear")),
        C=float(mcfg.get("C", 1.0)),
        gamma=mcfg.get("gamma", "scale"),
        class_weight=_class_weight_or_none(cfg),
        random_state=int(cfg["general"].get("random_state", 42)),
    )


def build_naive_bayes(cfg: Dict[str, Any]) -> BernoulliNB:
    """
    Build a Bernoulli Naive Bayes classifier.

    Features are already binary, so binarize=None keeps them as given.
    """
    mcfg = _model_cfg(cfg, "naive_bayes")
    return BernoulliNB(
        alpha=float(mcfg.get("alpha", 1.0)),
        fit_prior=bool(mcfg.get("fit_prior", True)),
        binarize=None,
    )


def build_logistic_regression(cfg: Dict[str, Any]) -> LogisticRegression:
    mcfg = _model_cfg(cfg, "logistic_regression")
    return LogisticRegression(
        C=float(mcfg.get("C", 1.0)),
        solver=str(mcfg.get("solver", "liblinear")),
        max_iter=int(mcfg.get("max_iter", 1000)),
        fit_intercept=bool(mcfg.get("fit_intercept", True)),
        random_state=int(cfg["general"].get("random_state", 42)),
        class_weight=_class_weight_or_none(cfg),
    )


CLASSIFIER_BUILDERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    "svm": build_svm,
    "naive_bayes": build_naive_bayes,
    "logistic_regression": build_logistic_regression,
}


# ---------------------------------------------------------------------------
# Public factory
# ---------------------------------------------------------------------------


def build_classifier(name: str, cfg: Dict[str, Any]) -> Any:
    """
    Build the classifier registered under `name`.

    Parameters
    ----------
    name : str
        One of "svm", "naive_bayes", "logistic_regression".
    cfg : Dict[str, Any]
        Full classifier configuration.

    Returns
    -------
    Any
        Unfitted scikit-learn estimator exposing fit/predict.

    Raises
    ------
    ValueError
        If the name is not a known classifier.
    """
    key = (name or "").lower()
    if key not in CLASSIFIER_BUILDERS:
        raise ValueError(
            f"Unknown classifier '{name}'. Available: {sorted(CLASSIFIER_BUILDERS)}"
        )
    return CLASSIFIER_BUILDERS[key](cfg)


def build_configured_classifier(
    config_path: str = DEFAULT_CLASSIFIER_CONFIG_PATH,
) -> Any:
    """Build the classifier selected by general.classifier in the config."""
    cfg = load_classifier_config(config_path)
    name = str(cfg["general"].get("classifier", "svm"))
    return build_classifier(name, cfg)
