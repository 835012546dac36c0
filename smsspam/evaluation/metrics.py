"""
Evaluation metrics for the spam filter.

This module centralizes the computation of the classification metrics
reported after a run:

- holdout accuracy (as a percentage, the headline number)
- precision, recall and F1-score for the spam class
- confusion matrix

Labels are encoded as +1 (spam) / -1 (ham).
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    precision_recall_fscore_support,
    confusion_matrix,
)


ArrayLike = Union[Sequence[int], np.ndarray]

SPAM_LABEL = 1
HAM_LABEL = -1


def holdout_accuracy(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Percentage of predictions that match the true labels.

    Parameters
    ----------
    y_true : ArrayLike
        True labels of the test set.
    y_pred : ArrayLike
        Predicted labels, one per test sample, same order.

    Returns
    -------
    float
        100 * (number of matches) / (test set size), in [0, 100].

    Raises
    ------
    ValueError
        If the inputs are empty or differ in length.
    """
    y_true_arr = np.asarray(y_true)
    y_pred_arr = np.asarray(y_pred)

    if y_true_arr.shape[0] == 0:
        raise ValueError("Cannot compute accuracy on an empty test set.")
    if y_true_arr.shape[0] != y_pred_arr.shape[0]:
        raise ValueError(
            f"Length mismatch: {y_true_arr.shape[0]} true labels vs "
            f"{y_pred_arr.shape[0]} predictions."
        )

    true_hits = int(np.sum(y_true_arr == y_pred_arr))
    return true_hits / y_true_arr.shape[0] * 100.0


def compute_classification_metrics(
    y_true: ArrayLike,
    y_pred: ArrayLike,
    pos_label: int = SPAM_LABEL,
    labels: Optional[Sequence[int]] = (HAM_LABEL, SPAM_LABEL),
    output_confusion_matrix: bool = True,
) -> Dict[str, Any]:
    """
    Compute standard binary classification metrics.

    Parameters
    ----------
    y_true : ArrayLike
        Ground-truth labels (-1 for ham, +1 for spam).
    y_pred : ArrayLike
        Predicted labels, same shape as y_true.
    pos_label : int
        Label treated as the positive class for precision/recall/F1.
    labels : Optional[Sequence[int]]
        Row/column order of the confusion matrix.
    output_confusion_matrix : bool
        If True, also compute and include the confusion matrix.

    Returns
    -------
    Dict[str, Any]
        Keys "accuracy" (fraction in [0, 1]), "precision", "recall", "f1",
        and optionally "confusion_matrix" as a nested list.
    """
    y_true_arr = np.asarray(y_true)
    y_pred_arr = np.asarray(y_pred)

    acc = accuracy_score(y_true_arr, y_pred_arr)

    prec, rec, f1, _ = precision_recall_fscore_support(
        y_true_arr,
        y_pred_arr,
        average="binary",
        pos_label=pos_label,
        zero_division=0,
    )

    metrics: Dict[str, Any] = {
        "accuracy": float(acc),
        "precision": float(prec),
        "recall": float(rec),
        "f1": float(f1),
    }

    if output_confusion_matrix:
        cm = confusion_matrix(
            y_true_arr,
            y_pred_arr,
            labels=list(labels) if labels is not None else None,
        )
        metrics["confusion_matrix"] = cm.tolist()

    return metrics
