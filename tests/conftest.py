"""
Shared fixtures for the test suite.

Provides a tiny labeled SMS corpus (6 ham, 4 spam), a helper to write it
as a headerless CSV, and a helper to write self-contained YAML configs
pointing at that CSV.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Optional, Tuple

import pandas as pd
import pytest
import yaml


SAMPLE_MESSAGES: List[Tuple[str, str]] = [
    ("ham", "Hey, are we still meeting for lunch today?"),
    ("spam", "WINNER!! You have won a $1000 prize. Call 09061701461 now to claim"),
    ("ham", "I'll call you when I get home"),
    ("spam", "Free entry to win a brand new phone! Text WIN to 87121"),
    ("ham", "Can you pick up some milk on the way back"),
    ("ham", "Ok see you at the station at 6"),
    ("spam", "URGENT: your account has been selected for a cash reward. Visit www.claim-now.com"),
    ("ham", "Happy birthday! Hope you have a great day"),
    ("spam", "Congratulations, you won a free holiday! Reply CLAIM to 80082 or email prizes@win.biz"),
    ("ham", "Sorry I missed your call, will ring back later"),
]


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


@pytest.fixture
def sample_messages() -> List[Tuple[str, str]]:
    return list(SAMPLE_MESSAGES)


@pytest.fixture
def sample_csv(tmp_path) -> str:
    """
    Write SAMPLE_MESSAGES as a Kaggle-style CSV: a "v1,v2" header row, one
    row with an unknown label, and the ten labeled messages.
    """
    rows = [("v1", "v2")] + [SAMPLE_MESSAGES[0], ("unknown", "not a label")]
    rows += SAMPLE_MESSAGES[1:]
    path = os.path.join(str(tmp_path), "spam.csv")
    pd.DataFrame(rows).to_csv(path, header=False, index=False, encoding="latin-1")
    return path


@pytest.fixture
def write_configs(tmp_path, sample_csv) -> Callable[..., Dict[str, str]]:
    """
    Return a function that writes data/classifier/train YAML configs into
    tmp_path and returns their paths. Keyword arguments are deep-merged
    into the data config; `classifier_overrides` and `train_overrides` are
    merged into the other two.
    """

    def _write(
        classifier_overrides: Optional[Dict[str, Any]] = None,
        train_overrides: Optional[Dict[str, Any]] = None,
        **data_overrides: Any,
    ) -> Dict[str, str]:
        data_cfg: Dict[str, Any] = {
            "dataset": {
                "path": sample_csv,
                "encoding": "latin-1",
                "label_column": 0,
                "text_column": 1,
                "negative_label": "ham",
                "positive_label": "spam",
            },
            "split": {
                "corpus_size": None,
                "test_size": 2,
                "shuffle": False,
                "random_state": 42,
            },
            "preprocessing": {
                "tokenize": {"method": "whitespace"},
                "stopwords": {"enabled": False, "language": "english"},
                "stemming": {"enabled": True, "algorithm": "porter"},
            },
            "vocabulary": {
                "popularity_threshold": 0,
                "count_mode": "occurrence",
                "scope": "corpus",
            },
        }
        _deep_update(data_cfg, data_overrides)

        classifier_cfg = {
            "general": {
                "classifier": "svm",
                "random_state": 42,
                "use_class_weight_balanced": False,
            },
            "classifiers": {"svm": {"kernel": "linear", "C": 1.0}},
        }
        _deep_update(classifier_cfg, classifier_overrides or {})
        train_cfg = {
            "general": {"random_state": 42},
            "paths": {"logs_dir": os.path.join(str(tmp_path), "logs")},
            "logging": {"level": "WARNING", "to_file": False},
        }
        _deep_update(train_cfg, train_overrides or {})

        paths = {}
        for name, cfg in (
            ("data", data_cfg),
            ("classifier", classifier_cfg),
            ("train", train_cfg),
        ):
            path = os.path.join(str(tmp_path), f"{name}.yaml")
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(cfg, f)
            paths[name] = path
        return paths

    return _write
