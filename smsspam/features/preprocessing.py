"""
Text preprocessing utilities for spam detection.

This module implements the normalization and tokenization pipeline used
to build bag-of-words features:

- lowercasing
- HTML tag stripping
- URL, email address, number and dollar-sign substitution
- removal of non-alphanumeric characters
- tokenization
- stopword removal
- stemming

The normalization rules are applied in a fixed order (see
NORMALIZATION_RULES). The order is part of the contract: substituting
numbers after stripping non-alphanumerics, for instance, would give a
different result. Tokenization, stopword and stemming options come from
the 'preprocessing' section of config/data.yaml.
"""

from __future__ import annotations

import html
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

import pandas as pd
from nltk.corpus import stopwords as nltk_stopwords
from nltk.stem import PorterStemmer, SnowballStemmer
from nltk.tokenize import RegexpTokenizer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS as SKLEARN_EN_STOPWORDS

from smsspam.data.datasets import load_data_config, DEFAULT_DATA_CONFIG_PATH


URL_TOKEN = "httpaddress"
EMAIL_TOKEN = "emailaddress"
NUMBER_TOKEN = "number"
DOLLAR_TOKEN = "dollar"

_TLDS = r"com|net|org|edu|gov|biz|info|mobi|co\.uk|org\.uk"

_HTML_TAG_RE = re.compile(r"<(?:!--.*?--|[a-z!/][^<>]*)>", re.DOTALL)
_URL_RE = re.compile(
    r"(?:https?|ftp)://\S+"
    r"|(?<![@\w.-])(?:www\.\S+|(?:[a-z0-9-]+\.)+(?:" + _TLDS + r")\b(?:[/?#]\S*)?)"
)
_EMAIL_RE = re.compile(r"\S+[a-z0-9]@[a-z0-9.]+", re.IGNORECASE | re.MULTILINE)
_NUMBER_RE = re.compile(r"[0-9]+")
_DOLLAR_RE = re.compile(r"\$")
_NON_ALNUM_RE = re.compile(r"[^0-9a-z]", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Normalization rules
# ---------------------------------------------------------------------------


def _coerce_text(text: Any) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    if not isinstance(text, str):
        return str(text)
    return text


def lowercase(text: str) -> str:
    return text.lower()


def strip_html(text: str) -> str:
    """
    Remove HTML-like tags, keeping the text between them, then decode
    character entities (e.g. "&amp;" -> "&").
    """
    return html.unescape(_HTML_TAG_RE.sub("", text))


def normalize_urls(text: str) -> str:
    """Replace every URL with the token "httpaddress"."""
    return _URL_RE.sub(f" {URL_TOKEN} ", text)


def normalize_emails(text: str) -> str:
    """
    Replace anything that looks like an email address with "emailaddress".

    The pattern is deliberately loose: look-alike addresses count too.
    """
    return _EMAIL_RE.sub(f" {EMAIL_TOKEN} ", text)


def normalize_numbers(text: str) -> str:
    """Replace every run of digits with "number"."""
    return _NUMBER_RE.sub(f" {NUMBER_TOKEN} ", text)


def normalize_dollars(text: str) -> str:
    """Replace every dollar sign with "dollar"."""
    return _DOLLAR_RE.sub(f" {DOLLAR_TOKEN} ", text)


def remove_non_alphanumeric(text: str) -> str:
    """Replace every character outside [0-9a-z] with a space."""
    return _NON_ALNUM_RE.sub(" ", text)


NORMALIZATION_RULES: List[Tuple[str, Callable[[str], str]]] = [
    ("lowercase", lowercase),
    ("strip_html", strip_html),
    ("normalize_urls", normalize_urls),
    ("normalize_emails", normalize_emails),
    ("normalize_numbers", normalize_numbers),
    ("normalize_dollars", normalize_dollars),
    ("remove_non_alphanumeric", remove_non_alphanumeric),
]


def normalize_text(text: Any) -> str:
    """
    Apply every rule in NORMALIZATION_RULES, in order, to a raw string.

    Parameters
    ----------
    text : Any
        Raw input text. Bytes are decoded as UTF-8, None becomes "".

    Returns
    -------
    str
        Normalized text containing only [0-9a-z] and spaces. Whitespace is
        not collapsed; e.g. "$5" -> " dollar  number ".
    """
    text = _coerce_text(text)
    for _, rule in NORMALIZATION_RULES:
        text = rule(text)
    return text


def normalize_texts(texts: Iterable[Any]) -> List[str]:
    return [normalize_text(t) for t in texts]


def normalize_series(series: pd.Series) -> pd.Series:
    """Apply `normalize_text` to every value of a pandas Series."""
    return series.apply(normalize_text)


# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------


_REGEXP_TOKENIZER = RegexpTokenizer(r"[a-z0-9]+")


def _tokenize_whitespace(text: str) -> List[str]:
    if not text:
        return []
    return text.split()


def tokenize_text(text: str, method: str = "whitespace") -> List[str]:
    """
    Tokenize a text string using the specified method.

    Currently supported:
    - "whitespace": .split() on runs of whitespace.
    - "regexp": NLTK RegexpTokenizer over [a-z0-9]+ runs.

    Unknown methods fall back to whitespace. Empty tokens never appear in
    the output.
    """
    method = (method or "whitespace").lower()
    if method == "regexp":
        return [t for t in _REGEXP_TOKENIZER.tokenize(text) if t]
    return _tokenize_whitespace(text)


# ---------------------------------------------------------------------------
# Stopwords
# ---------------------------------------------------------------------------


def get_stopword_set(language: str = "english") -> Set[str]:
    """
    Build a set of stopwords for the given language.

    NLTK's list is preferred; when its corpus has not been downloaded
    (nltk.download("stopwords")), scikit-learn's English list is used.
    Other languages without NLTK data yield an empty set.
    """
    lang = (language or "english").lower()

    try:
        return set(nltk_stopwords.words(lang))
    except LookupError:
        pass

    if lang == "english":
        return set(SKLEARN_EN_STOPWORDS)
    return set()


def remove_stopwords(tokens: Iterable[str], stopword_set: Set[str]) -> List[str]:
    if not stopword_set:
        return list(tokens)
    return [t for t in tokens if t not in stopword_set]


# ---------------------------------------------------------------------------
# Stemming
# ---------------------------------------------------------------------------


def build_stemmer(algorithm: str = "porter"):
    """
    Build a stemmer with a .stem(token) method.

    Parameters
    ----------
    algorithm : str
        "porter" (default) or "snowball". Unknown names use Porter.
    """
    algo = (algorithm or "porter").lower()
    if algo == "snowball":
        return SnowballStemmer("english")
    return PorterStemmer()


def stem_tokens(tokens: Iterable[str], algorithm: str = "porter") -> List[str]:
    """
    Reduce each token to its stem, e.g. "discounted" -> "discount".
    Order is preserved; tokens that stem to "" are dropped.
    """
    stemmer = build_stemmer(algorithm)
    stemmed = (stemmer.stem(t) for t in tokens)
    return [t for t in stemmed if t]


# ---------------------------------------------------------------------------
# High-level preprocessing functions
# ---------------------------------------------------------------------------


def get_preprocessing_cfg(
    config_path: str = DEFAULT_DATA_CONFIG_PATH,
) -> Dict[str, Any]:
    """Retrieve the 'preprocessing' section from the data configuration."""
    cfg = load_data_config(config_path)
    return cfg["preprocessing"] or {}


class TextPreprocessor:
    """
    Normalize, tokenize, filter stopwords and stem raw texts.

    The stopword set and the stemmer are built once from the preprocessing
    configuration and reused for every document.
    """

    def __init__(self, preprocessing_cfg: Optional[Dict[str, Any]] = None):
        cfg = preprocessing_cfg or {}

        tokenize_cfg = cfg.get("tokenize", {}) or {}
        self.tokenize_method = tokenize_cfg.get("method", "whitespace")

        sw_cfg = cfg.get("stopwords", {}) or {}
        if bool(sw_cfg.get("enabled", True)):
            self.stopword_set = get_stopword_set(sw_cfg.get("language", "english"))
        else:
            self.stopword_set = set()

        stem_cfg = cfg.get("stemming", {}) or {}
        if bool(stem_cfg.get("enabled", True)):
            self.stemmer = build_stemmer(stem_cfg.get("algorithm", "porter"))
        else:
            self.stemmer = None

    def __call__(self, text: Any) -> List[str]:
        tokens = tokenize_text(normalize_text(text), method=self.tokenize_method)
        tokens = remove_stopwords(tokens, self.stopword_set)
        if self.stemmer is not None:
            tokens = [s for s in (self.stemmer.stem(t) for t in tokens) if s]
        return tokens


def preprocess_text_to_tokens(
    text: Any,
    preprocessing_cfg: Optional[Dict[str, Any]] = None,
) -> List[str]:
    """
    Full preprocessing pipeline for a single text, returning tokens.

    Parameters
    ----------
    text : Any
        Raw input text.
    preprocessing_cfg : Optional[Dict[str, Any]]
        The 'preprocessing' section of config/data.yaml. None means the
        defaults: whitespace tokenization, English stopwords removed,
        Porter stemming.

    Returns
    -------
    List[str]
        Stemmed tokens in document order.
    """
    return TextPreprocessor(preprocessing_cfg)(text)


def tokenize_corpus(
    texts: Iterable[Any],
    preprocessing_cfg: Optional[Dict[str, Any]] = None,
) -> List[List[str]]:
    """
    Preprocess every text of a corpus into a tokenized document.

    Returns
    -------
    List[List[str]]
        One token list per input text, in input order.
    """
    preprocessor = TextPreprocessor(preprocessing_cfg)
    return [preprocessor(t) for t in texts]
