"""
Training and evaluation pipeline for the bag-of-words spam filter.

This module runs the full experiment:

- load the labeled SMS corpus (spam/ham rows only)
- normalize, tokenize and stem every message
- optionally shuffle messages and labels together
- split into a training prefix and a test suffix
- build the vocabulary (from the training split or from the whole corpus,
  see vocabulary.scope in config/data.yaml)
- turn every message into a binary bag-of-words vector
- train the configured classifier and predict the test set
- report holdout accuracy (printed as a percentage) plus precision,
  recall and F1

It can be used as a library (`train_spam_filter`, `run_bow_pipeline`) or
as a script (`python -m smsspam.training.pipeline`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from smsspam.data.datasets import (
    DEFAULT_DATA_CONFIG_PATH,
    build_label_mapping,
    filter_labeled_records,
    load_data_config,
    load_sms_records,
)
from smsspam.data.split import (
    resolve_split_sizes,
    shuffle_in_unison,
    split_train_test,
)
from smsspam.evaluation.metrics import compute_classification_metrics, holdout_accuracy
from smsspam.features.bow_vectorizer import fit_bow_extractor
from smsspam.features.preprocessing import tokenize_corpus
from smsspam.features.vocabulary import DEFAULT_POPULARITY_THRESHOLD
from smsspam.models.classifiers import (
    DEFAULT_CLASSIFIER_CONFIG_PATH,
    build_classifier,
    load_classifier_config,
)
from smsspam.utils.training_utils import (
    DEFAULT_TRAIN_CONFIG_PATH,
    get_logger,
    load_train_config,
    seed_everything,
)


VOCABULARY_SCOPES = ("train", "corpus")


@dataclass
class PipelineResult:
    accuracy: float
    metrics: Dict[str, Any] = field(default_factory=dict)
    vocabulary_size: int = 0
    train_size: int = 0
    test_size: int = 0
    y_pred: List[int] = field(default_factory=list)


def run_bow_pipeline(
    texts: Sequence[Any],
    labels: Sequence[str],
    data_cfg: Dict[str, Any],
    classifier: Any,
    logger: Optional[logging.Logger] = None,
) -> PipelineResult:
    """
    Run preprocessing, feature extraction, training and evaluation on an
    in-memory corpus.

    Parameters
    ----------
    texts : Sequence[Any]
        Raw message texts.
    labels : Sequence[str]
        String labels parallel to `texts`. Pairs whose label is neither
        the positive nor the negative label are dropped silently.
    data_cfg : Dict[str, Any]
        Full data configuration (dataset, split, preprocessing, vocabulary).
    classifier : Any
        Unfitted estimator exposing fit(X, y) and predict(X).
    logger : Optional[logging.Logger]
        Logger for progress messages.

    Returns
    -------
    PipelineResult
        Accuracy percentage, extended metrics and run sizes.

    Raises
    ------
    ValueError
        If the split sizes do not fit the corpus, the test set is empty,
        the vocabulary scope is unknown, or no token passes the popularity
        threshold.
    """
    logger = logger or logging.getLogger(__name__)

    split_cfg = data_cfg.get("split", {}) or {}
    vocab_cfg = data_cfg.get("vocabulary", {}) or {}
    label_mapping = build_label_mapping(data_cfg.get("dataset", {}) or {})

    scope = str(vocab_cfg.get("scope", "train")).lower()
    if scope not in VOCABULARY_SCOPES:
        raise ValueError(
            f"Unknown vocabulary scope '{scope}'. Expected one of: {VOCABULARY_SCOPES}"
        )

    records = list(filter_labeled_records(zip(labels, texts), label_mapping.keys()))
    texts = [text for _, text in records]
    y = [label_mapping[label] for label, _ in records]

    logger.info("Tokenizing %d messages...", len(texts))
    documents = tokenize_corpus(texts, data_cfg.get("preprocessing"))

    if bool(split_cfg.get("shuffle", False)):
        documents, y = shuffle_in_unison(
            documents, y, random_state=split_cfg.get("random_state")
        )

    train_size, test_size = resolve_split_sizes(len(documents), split_cfg)
    total = train_size + test_size
    if 0 <= total < len(documents):
        documents, y = documents[:total], y[:total]

    split = split_train_test(documents, y, train_size)
    if split is None:
        raise ValueError(
            f"Cannot split {len(documents)} samples into train_size={train_size} "
            f"and test_size={test_size}."
        )
    if len(split.X_test) == 0:
        raise ValueError("Test set is empty; lower split.test_size or add data.")

    logger.info("Train size: %d, Test size: %d", len(split.X_train), len(split.X_test))

    vocabulary_documents = split.X_train if scope == "train" else documents
    extractor = fit_bow_extractor(
        vocabulary_documents,
        popularity_threshold=int(
            vocab_cfg.get("popularity_threshold", DEFAULT_POPULARITY_THRESHOLD)
        ),
        count_mode=str(vocab_cfg.get("count_mode", "occurrence")),
    )
    if extractor.n_features == 0:
        raise ValueError(
            "Vocabulary is empty; lower vocabulary.popularity_threshold."
        )
    logger.info(
        "Built vocabulary of %d tokens from the %s.",
        extractor.n_features,
        "training split" if scope == "train" else "whole corpus",
    )

    X_train = extractor.transform(split.X_train)
    X_test = extractor.transform(split.X_test)
    y_train = np.asarray(split.y_train)
    y_test = np.asarray(split.y_test)

    logger.info("Training %s...", type(classifier).__name__)
    classifier.fit(X_train, y_train)
    y_pred = classifier.predict(X_test)

    accuracy = holdout_accuracy(y_test, y_pred)
    metrics = compute_classification_metrics(y_true=y_test, y_pred=y_pred)
    logger.info(
        "Metrics - acc: %.4f, prec: %.4f, rec: %.4f, f1: %.4f",
        metrics["accuracy"],
        metrics["precision"],
        metrics["recall"],
        metrics["f1"],
    )

    return PipelineResult(
        accuracy=accuracy,
        metrics=metrics,
        vocabulary_size=extractor.n_features,
        train_size=len(split.X_train),
        test_size=len(split.X_test),
        y_pred=[int(v) for v in y_pred],
    )


def train_spam_filter(
    data_config_path: str = DEFAULT_DATA_CONFIG_PATH,
    classifier_config_path: str = DEFAULT_CLASSIFIER_CONFIG_PATH,
    train_config_path: str = DEFAULT_TRAIN_CONFIG_PATH,
) -> PipelineResult:
    """
    End-to-end run driven by the three YAML configuration files.

    Parameters
    ----------
    data_config_path : str
        Path to config/data.yaml.
    classifier_config_path : str
        Path to config/classifier.yaml.
    train_config_path : str
        Path to config/train.yaml.

    Returns
    -------
    PipelineResult
        Result of `run_bow_pipeline` on the configured corpus.
    """
    data_cfg = load_data_config(data_config_path)
    classifier_cfg = load_classifier_config(classifier_config_path)
    train_cfg = load_train_config(train_config_path)

    seed_everything(int((train_cfg.get("general", {}) or {}).get("random_state", 42)))

    classifier_name = str(classifier_cfg["general"].get("classifier", "svm"))
    classifier = build_classifier(classifier_name, classifier_cfg)

    # one logger, and one log file, per classifier
    logger = get_logger(
        name=f"train_spam_filter.{classifier_name}",
        config=train_cfg,
        log_file_suffix=f"pipeline_{classifier_name}",
    )
    logger.info("Using classifier: %s", classifier_name)

    texts, labels = load_sms_records(data_config_path)
    logger.info("Loaded dataset with %d samples.", len(texts))
    logger.info("Label mapping: %s", build_label_mapping(data_cfg["dataset"]))

    return run_bow_pipeline(
        texts=texts,
        labels=labels,
        data_cfg=data_cfg,
        classifier=classifier,
        logger=logger,
    )


def report_accuracy(result: PipelineResult) -> None:
    print(result.accuracy)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    result = train_spam_filter()
    report_accuracy(result)


if __name__ == "__main__":
    main()
