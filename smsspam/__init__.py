"""
Top-level package for the SMS spam filter.

This package contains modules for:
- loading the labeled SMS corpus and splitting it into train/test sets
- text normalization, tokenization and stemming
- vocabulary construction and bag-of-words feature extraction
- classifier construction
- the end-to-end training pipeline
- evaluation metrics and shared helpers
"""
