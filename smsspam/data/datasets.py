"""
Dataset loading utilities for the SMS Spam Collection dataset.

This module is responsible for:
- reading the dataset configuration from config/data.yaml
- reading the raw, headerless two-column CSV (label, text) with pandas
- dropping rows whose label is neither the positive nor the negative label
- mapping string labels ("spam", "ham") to numeric IDs (+1, -1)

Rows with an unexpected label (including the "v1,v2" header row of the
Kaggle file) are skipped silently; they are not errors.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable, Iterator, List, Tuple

import pandas as pd
import yaml


DEFAULT_DATA_CONFIG_PATH = "config/data.yaml"

Record = Tuple[str, str]


def _load_yaml(path: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file and return it as a dictionary.

    Parameters
    ----------
    path : str
        Path to the YAML file.

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file is empty or cannot be parsed.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        raise ValueError(f"Config file is empty or invalid: {path}")

    return cfg


def load_data_config(config_path: str = DEFAULT_DATA_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load and return the full data configuration dictionary.

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing the "dataset", "split", "preprocessing" and
        "vocabulary" sections.
    """
    cfg = _load_yaml(config_path)

    for section in ("dataset", "split", "preprocessing", "vocabulary"):
        if section not in cfg:
            raise KeyError(f'Missing "{section}" section in data config: {config_path}')

    return cfg


def build_label_mapping(dataset_cfg: Dict[str, Any]) -> Dict[str, int]:
    """
    Build the mapping from string labels to numeric IDs.

    The negative label maps to -1 and the positive label to +1, which is
    the target encoding expected by the SVM.
    """
    negative_label = dataset_cfg.get("negative_label", "ham")
    positive_label = dataset_cfg.get("positive_label", "spam")

    return {
        negative_label: -1,
        positive_label: 1,
    }


def get_label_mapping(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Dict[str, int]:
    """
    Return the label mapping derived from the "dataset" section of
    config/data.yaml, e.g. {"ham": -1, "spam": 1}.
    """
    cfg = load_data_config(config_path)
    return build_label_mapping(cfg["dataset"])


def filter_labeled_records(
    records: Iterable[Record],
    valid_labels: Iterable[str],
) -> Iterator[Record]:
    """
    Yield only the (label, text) records whose label is valid.

    Parameters
    ----------
    records : Iterable[Tuple[str, str]]
        Raw (label, text) pairs.
    valid_labels : Iterable[str]
        Accepted label strings.

    Yields
    ------
    Tuple[str, str]
        Records with a valid label, in input order.
    """
    accepted = set(valid_labels)
    for label, text in records:
        if label not in accepted:
            continue
        yield label, text


def _read_raw_csv(dataset_cfg: Dict[str, Any]) -> pd.DataFrame:
    csv_path = dataset_cfg.get("path", "data/raw/spam.csv")
    encoding = dataset_cfg.get("encoding", "latin-1")
    label_column = int(dataset_cfg.get("label_column", 0))
    text_column = int(dataset_cfg.get("text_column", 1))

    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"Dataset CSV not found at: {csv_path}")

    df = pd.read_csv(
        csv_path,
        header=None,
        usecols=[label_column, text_column],
        dtype=str,
        keep_default_na=False,
        encoding=encoding,
        on_bad_lines="skip",
    )
    df = df.rename(columns={label_column: "label", text_column: "text"})
    return df[["label", "text"]].fillna("")


def iter_sms_records(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Iterator[Record]:
    """
    Read the configured CSV and yield valid (label, text) records.

    Parameters
    ----------
    config_path : str
        Path to the data YAML configuration.

    Yields
    ------
    Tuple[str, str]
        (label, text) pairs whose label is "spam" or "ham" (or the
        configured positive/negative label names).

    Raises
    ------
    FileNotFoundError
        If the dataset CSV file cannot be found.
    """
    cfg = load_data_config(config_path)
    dataset_cfg = cfg["dataset"]

    df = _read_raw_csv(dataset_cfg)
    label_mapping = build_label_mapping(dataset_cfg)

    raw_records = zip(df["label"].tolist(), df["text"].tolist())
    yield from filter_labeled_records(raw_records, label_mapping.keys())


def load_sms_records(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Tuple[List[str], List[str]]:
    """
    Collect all valid records into parallel (texts, labels) lists.

    Returns
    -------
    Tuple[List[str], List[str]]
        Texts and their string labels, in file order.
    """
    texts: List[str] = []
    labels: List[str] = []
    for label, text in iter_sms_records(config_path):
        labels.append(label)
        texts.append(text)
    return texts, labels


def load_sms_dataset(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Tuple[pd.DataFrame, Dict[str, int]]:
    """
    Load the SMS Spam Collection dataset according to the configuration.

    Parameters
    ----------
    config_path : str, optional
        Path to the data YAML configuration file.

    Returns
    -------
    Tuple[pd.DataFrame, Dict[str, int]]
        A tuple containing:
        - df: DataFrame with columns ["label", "text", "label_id"]
        - label_mapping: dict mapping label strings to +1/-1.
    """
    label_mapping = get_label_mapping(config_path)
    records = list(iter_sms_records(config_path))

    df = pd.DataFrame(records, columns=["label", "text"])
    df["label_id"] = df["label"].map(label_mapping).astype(int)

    return df, label_mapping
