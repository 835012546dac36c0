"""
Run the bag-of-words spam filter experiment.

This script is a convenience wrapper around
`smsspam.training.pipeline.train_spam_filter`, which:

- loads the configured SMS corpus
- normalizes, tokenizes and stems the messages
- builds the vocabulary and binary feature vectors
- trains the classifier selected in config/classifier.yaml
- evaluates it on the held-out test suffix

The holdout accuracy (a percentage) is printed to stdout.

Usage (from project root):

    python -m scripts.run_spam_filter
    # or
    python scripts/run_spam_filter.py --classifier-config config/classifier.yaml
"""

from __future__ import annotations

import argparse

from smsspam.training.pipeline import report_accuracy, train_spam_filter
from smsspam.utils.training_utils import load_train_config, get_logger


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Train and evaluate the bag-of-words SMS spam filter."
    )
    parser.add_argument(
        "--data-config",
        type=str,
        default="config/data.yaml",
        help="Path to data config YAML (default: config/data.yaml).",
    )
    parser.add_argument(
        "--classifier-config",
        type=str,
        default="config/classifier.yaml",
        help="Path to classifier config YAML (default: config/classifier.yaml).",
    )
    parser.add_argument(
        "--train-config",
        type=str,
        default="config/train.yaml",
        help="Path to global train config YAML (default: config/train.yaml).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    train_cfg = load_train_config(args.train_config)
    logger = get_logger(
        name="run_spam_filter",
        config=train_cfg,
        log_file_suffix="run",
    )

    logger.info("=" * 80)
    logger.info("Starting spam filter run.")
    logger.info(
        "Configs: data=%s, classifier=%s, train=%s",
        args.data_config,
        args.classifier_config,
        args.train_config,
    )

    result = train_spam_filter(
        data_config_path=args.data_config,
        classifier_config_path=args.classifier_config,
        train_config_path=args.train_config,
    )

    logger.info(
        "Vocabulary: %d tokens, train: %d, test: %d",
        result.vocabulary_size,
        result.train_size,
        result.test_size,
    )
    logger.info("Confusion matrix (ham, spam): %s", result.metrics.get("confusion_matrix"))
    logger.info("Spam filter run completed.")

    report_accuracy(result)


if __name__ == "__main__":
    main()
