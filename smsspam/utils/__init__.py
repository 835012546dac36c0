"""
Shared helpers: config loading, filesystem, seeding and logging.
"""
