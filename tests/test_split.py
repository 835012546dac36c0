"""
Tests for shuffling and prefix/suffix train/test splitting.
"""

from __future__ import annotations

import numpy as np

from smsspam.data.split import (
    get_split_config,
    resolve_split_sizes,
    shuffle_in_unison,
    split_train_test,
)


def test_split_round_trip_reproduces_input():
    X = [[i, i + 1] for i in range(10)]
    y = [1 if i % 3 == 0 else -1 for i in range(10)]

    split = split_train_test(X, y, train_size=7)

    assert split is not None
    assert len(split.X_train) == 7 and len(split.X_test) == 3
    assert list(split.X_train) + list(split.X_test) == X
    assert list(split.y_train) + list(split.y_test) == y


def test_split_works_on_numpy_arrays():
    X = np.arange(12).reshape(6, 2)
    y = np.array([1, -1, 1, -1, 1, -1])
    split = split_train_test(X, y, train_size=4)
    assert split.X_train.shape == (4, 2)
    assert split.y_test.tolist() == [1, -1]


def test_split_edges():
    X, y = ["a", "b"], [1, -1]
    assert split_train_test(X, y, 0).X_train == []
    assert split_train_test(X, y, 2).X_test == []


def test_split_misconfiguration_returns_none():
    X, y = ["a", "b", "c"], [1, -1, 1]
    assert split_train_test(X, y, 4) is None
    assert split_train_test(X, y, -1) is None
    assert split_train_test(X, y[:2], 1) is None


def test_shuffle_keeps_correspondence_and_is_seeded():
    X = [f"msg{i}" for i in range(20)]
    y = list(range(20))

    X_s, y_s = shuffle_in_unison(X, y, random_state=7)
    assert [f"msg{label}" for label in y_s] == list(X_s)
    assert sorted(y_s) == y

    X_s2, y_s2 = shuffle_in_unison(X, y, random_state=7)
    assert list(X_s2) == list(X_s) and list(y_s2) == list(y_s)


def test_shuffle_ragged_token_lists():
    docs = [["a"], ["b", "c"], [], ["d", "e", "f"]]
    labels = [1, 2, 0, 3]
    docs_s, labels_s = shuffle_in_unison(docs, labels, random_state=0)
    assert all(len(d) == lab for d, lab in zip(docs_s, labels_s))


def test_resolve_split_sizes():
    assert resolve_split_sizes(10, {"test_size": 2}) == (8, 2)
    assert resolve_split_sizes(10, {"corpus_size": None, "test_size": 2}) == (8, 2)
    assert resolve_split_sizes(10, {"corpus_size": 6, "test_size": 2}) == (4, 2)
    assert resolve_split_sizes(3, {"test_size": 5}) == (-2, 5)


def test_shipped_split_config():
    cfg = get_split_config("config/data.yaml")
    assert "test_size" in cfg
    assert "shuffle" in cfg
