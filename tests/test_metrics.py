"""
Tests for holdout accuracy and the extended classification metrics.
"""

from __future__ import annotations

import numpy as np
import pytest

from smsspam.evaluation.metrics import compute_classification_metrics, holdout_accuracy


Y_TRUE = [1, -1, 1, -1]
Y_PRED = [1, 1, 1, -1]


def test_holdout_accuracy_is_a_percentage():
    assert holdout_accuracy(Y_TRUE, Y_PRED) == pytest.approx(75.0)
    assert holdout_accuracy(np.array([1, 1]), np.array([1, 1])) == pytest.approx(100.0)
    assert holdout_accuracy([1, -1], [-1, 1]) == pytest.approx(0.0)


def test_holdout_accuracy_rejects_bad_input():
    with pytest.raises(ValueError):
        holdout_accuracy([], [])
    with pytest.raises(ValueError):
        holdout_accuracy([1, -1], [1])


def test_classification_metrics_for_spam_class():
    metrics = compute_classification_metrics(Y_TRUE, Y_PRED)

    assert metrics["accuracy"] == pytest.approx(0.75)
    assert metrics["precision"] == pytest.approx(2 / 3)
    assert metrics["recall"] == pytest.approx(1.0)
    assert metrics["f1"] == pytest.approx(0.8)
    # rows/columns ordered (ham, spam)
    assert metrics["confusion_matrix"] == [[1, 1], [0, 2]]


def test_confusion_matrix_optional():
    metrics = compute_classification_metrics(Y_TRUE, Y_PRED, output_confusion_matrix=False)
    assert "confusion_matrix" not in metrics
