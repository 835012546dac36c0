"""
Train/test splitting utilities for the SMS Spam dataset.

The split is positional: the first `train_size` samples form the training
set and the remainder the test set. Any shuffling has to happen before the
split, via `shuffle_in_unison`, which applies one permutation to features
and labels alike (scikit-learn's `utils.shuffle`).

Split sizes come from the "split" section of config/data.yaml:
- corpus_size: total number of samples M (null -> number of loaded records)
- test_size: number of test samples; train_size = M - test_size
"""

from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

from sklearn.utils import shuffle as sk_shuffle

from smsspam.data.datasets import load_data_config, DEFAULT_DATA_CONFIG_PATH


class DatasetSplit(NamedTuple):
    X_train: Sequence[Any]
    y_train: Sequence[Any]
    X_test: Sequence[Any]
    y_test: Sequence[Any]


def get_split_config(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Dict[str, Any]:
    """
    Retrieve the 'split' section from the data configuration.

    Parameters
    ----------
    config_path : str
        Path to the data YAML configuration.

    Returns
    -------
    Dict[str, Any]
        Split configuration dictionary.
    """
    cfg = load_data_config(config_path)
    return cfg["split"]


def resolve_split_sizes(
    n_samples: int,
    split_cfg: Dict[str, Any],
) -> Tuple[int, int]:
    """
    Compute (train_size, test_size) from the split configuration.

    Parameters
    ----------
    n_samples : int
        Number of records actually loaded.
    split_cfg : Dict[str, Any]
        The "split" section of config/data.yaml.

    Returns
    -------
    Tuple[int, int]
        (train_size, test_size). train_size may come out negative or larger
        than n_samples for a misconfigured split; `split_train_test` rejects
        those.
    """
    corpus_size = split_cfg.get("corpus_size")
    total = int(corpus_size) if corpus_size is not None else int(n_samples)
    test_size = int(split_cfg.get("test_size", 0))
    return total - test_size, test_size


def shuffle_in_unison(
    features: Sequence[Any],
    labels: Sequence[Any],
    random_state: Optional[int] = None,
) -> Tuple[Any, Any]:
    """
    Shuffle features and labels with the same permutation.

    Parameters
    ----------
    features : Sequence
        Feature rows (lists, arrays or tokenized documents).
    labels : Sequence
        Labels parallel to `features`.
    random_state : Optional[int]
        Seed for a reproducible permutation.

    Returns
    -------
    Tuple
        (shuffled_features, shuffled_labels), index correspondence preserved.
    """
    if len(features) == 0:
        return features, labels
    return sk_shuffle(features, labels, random_state=random_state)


def split_train_test(
    features: Sequence[Any],
    labels: Sequence[Any],
    train_size: int,
) -> Optional[DatasetSplit]:
    """
    Split parallel feature/label sequences into a training prefix and a
    test suffix, preserving order.

    Parameters
    ----------
    features : Sequence
        Feature rows.
    labels : Sequence
        Labels parallel to `features`.
    train_size : int
        Number of leading samples that go to the training set.

    Returns
    -------
    Optional[DatasetSplit]
        The split, or None if train_size is negative, exceeds the number
        of samples, or the sequences differ in length. Callers must check.
    """
    n_samples = len(features)
    if len(labels) != n_samples:
        return None
    if train_size < 0 or train_size > n_samples:
        return None

    return DatasetSplit(
        X_train=features[:train_size],
        y_train=labels[:train_size],
        X_test=features[train_size:],
        y_test=labels[train_size:],
    )
