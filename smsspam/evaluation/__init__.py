"""
Evaluation utilities.

This subpackage offers holdout accuracy plus precision, recall, F1-score
and confusion matrix computations.
"""
