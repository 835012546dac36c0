"""
Text preprocessing and feature extraction utilities.

This subpackage includes:
- ordered normalization rules, tokenization, stopword removal and stemming
- vocabulary construction from tokenized documents
- binary bag-of-words feature vectors.
"""
