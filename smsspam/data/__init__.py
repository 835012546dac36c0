"""
Data loading and dataset utilities.

This subpackage provides:
- functions to read the SMS Spam Collection CSV into labeled records
- synchronized shuffling and prefix/suffix train/test splitting.
"""
