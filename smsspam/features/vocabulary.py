"""
Vocabulary construction for bag-of-words features.

The vocabulary is the ordered list of tokens that defines the feature
index space: position i of every feature vector refers to vocabulary[i].
It keeps the tokens whose corpus count is strictly greater than a
popularity threshold, in the order they were first seen while scanning
the corpus.

Counting is controlled by 'count_mode':
- "occurrence" (default): every occurrence of a token counts
- "document": a token counts at most once per document

Settings are read from the 'vocabulary' section of config/data.yaml.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Tuple

from smsspam.data.datasets import load_data_config, DEFAULT_DATA_CONFIG_PATH


DEFAULT_POPULARITY_THRESHOLD = 5
COUNT_MODES = ("occurrence", "document")


class Vocabulary(Sequence[str]):
    """
    Immutable, ordered sequence of unique tokens.

    Supports len(), iteration, indexing, `in` and `index_of(token)`.
    """

    def __init__(self, tokens: Iterable[str]):
        ordered: List[str] = []
        index: Dict[str, int] = {}
        for token in tokens:
            if token in index:
                continue
            index[token] = len(ordered)
            ordered.append(token)
        self._tokens: Tuple[str, ...] = tuple(ordered)
        self._index = index

    def __getitem__(self, i):
        return self._tokens[i]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vocabulary):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self._tokens)} tokens)"

    def index_of(self, token: str) -> int:
        """Return the feature index of `token`; KeyError if absent."""
        return self._index[token]

    def to_list(self) -> List[str]:
        return list(self._tokens)


def get_vocabulary_cfg(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Dict[str, Any]:
    """Retrieve the 'vocabulary' section from the data configuration."""
    cfg = load_data_config(config_path)
    return cfg["vocabulary"] or {}


def count_token_occurrences(
    documents: Iterable[Sequence[str]],
    count_mode: str = "occurrence",
) -> Counter:
    """
    Count tokens across a corpus of tokenized documents.

    Parameters
    ----------
    documents : Iterable[Sequence[str]]
        Tokenized documents.
    count_mode : str
        "occurrence" counts every occurrence; "document" counts each token
        at most once per document.

    Returns
    -------
    Counter
        Mapping token -> count, keys in first-seen order.

    Raises
    ------
    ValueError
        If count_mode is not one of COUNT_MODES.
    """
    if count_mode not in COUNT_MODES:
        raise ValueError(
            f"Unknown count_mode '{count_mode}'. Expected one of: {COUNT_MODES}"
        )

    counts: Counter = Counter()
    for tokens in documents:
        if count_mode == "document":
            # dict.fromkeys keeps first-seen order within the document
            tokens = list(dict.fromkeys(tokens))
        counts.update(tokens)
    return counts


def build_vocabulary(
    documents: Iterable[Sequence[str]],
    popularity_threshold: int = DEFAULT_POPULARITY_THRESHOLD,
    count_mode: str = "occurrence",
) -> Vocabulary:
    """
    Build the vocabulary from a corpus of tokenized documents.

    A token is kept when its count is strictly greater than
    `popularity_threshold`; a token seen exactly `popularity_threshold`
    times is dropped.

    Parameters
    ----------
    documents : Iterable[Sequence[str]]
        Tokenized documents, scanned in order.
    popularity_threshold : int
        Minimum count (exclusive). 0 keeps every token.
    count_mode : str
        See `count_token_occurrences`.

    Returns
    -------
    Vocabulary
        Selected tokens in first-seen order.

    Raises
    ------
    ValueError
        If popularity_threshold is negative or count_mode is unknown.
    """
    if popularity_threshold < 0:
        raise ValueError(
            f"popularity_threshold must be >= 0, got {popularity_threshold}"
        )

    counts = count_token_occurrences(documents, count_mode=count_mode)
    return Vocabulary(
        token for token, count in counts.items() if count > popularity_threshold
    )
