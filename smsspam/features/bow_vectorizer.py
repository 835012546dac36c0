"""
Binary bag-of-words feature extraction.

A `BagOfWordsExtractor` holds one Vocabulary and maps each tokenized
document to a vector of 0/1 values: position i is 1 when vocabulary[i]
occurs anywhere in the document. Repeated tokens do not raise the value
above 1. The same extractor (and therefore the same vocabulary) is used
for every document of a run, so all vectors share length and meaning.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from smsspam.features.vocabulary import (
    DEFAULT_POPULARITY_THRESHOLD,
    Vocabulary,
    build_vocabulary,
)


FEATURE_DTYPE = np.int8


class BagOfWordsExtractor:
    """
    Map tokenized documents to binary feature vectors over a vocabulary.

    Parameters
    ----------
    vocabulary : Vocabulary or Sequence[str]
        Feature index space. Plain sequences are wrapped in a Vocabulary.
    """

    def __init__(self, vocabulary: Sequence[str]):
        if not isinstance(vocabulary, Vocabulary):
            vocabulary = Vocabulary(vocabulary)
        self.vocabulary = vocabulary

    @property
    def n_features(self) -> int:
        return len(self.vocabulary)

    def feature_names(self) -> List[str]:
        return self.vocabulary.to_list()

    def extract(self, tokens: Iterable[str]) -> np.ndarray:
        """
        Build the feature vector of a single tokenized document.

        Parameters
        ----------
        tokens : Iterable[str]
            Tokens of one document.

        Returns
        -------
        np.ndarray
            1-D array of shape (n_features,) with values in {0, 1}.
        """
        vector = np.zeros(self.n_features, dtype=FEATURE_DTYPE)
        for token in set(tokens):
            if token in self.vocabulary:
                vector[self.vocabulary.index_of(token)] = 1
        return vector

    def transform(self, documents: Iterable[Iterable[str]]) -> np.ndarray:
        """
        Build the feature matrix of a corpus.

        Returns
        -------
        np.ndarray
            2-D array of shape (n_documents, n_features). An empty corpus
            gives shape (0, n_features).
        """
        rows = [self.extract(tokens) for tokens in documents]
        if not rows:
            return np.zeros((0, self.n_features), dtype=FEATURE_DTYPE)
        return np.vstack(rows)

    def __repr__(self) -> str:
        return f"BagOfWordsExtractor(n_features={self.n_features})"


def fit_bow_extractor(
    documents: Iterable[Sequence[str]],
    popularity_threshold: int = DEFAULT_POPULARITY_THRESHOLD,
    count_mode: str = "occurrence",
) -> BagOfWordsExtractor:
    """
    Build a vocabulary from `documents` and wrap it in an extractor.

    Parameters
    ----------
    documents : Iterable[Sequence[str]]
        Tokenized documents used to select the vocabulary.
    popularity_threshold : int
        Tokens need a count strictly greater than this to be kept.
    count_mode : str
        "occurrence" or "document".

    Returns
    -------
    BagOfWordsExtractor
        Extractor over the freshly built vocabulary.
    """
    vocabulary = build_vocabulary(
        documents,
        popularity_threshold=popularity_threshold,
        count_mode=count_mode,
    )
    return BagOfWordsExtractor(vocabulary)
