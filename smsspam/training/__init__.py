"""
Training pipelines.

The end-to-end bag-of-words spam filter run lives in
smsspam.training.pipeline.
"""
