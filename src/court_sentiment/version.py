"""
Version constants for the sentiment subsystem.

Recorded alongside persisted sentiment results so a stored score can be
traced back to the scorer and lexicon that produced it.
"""

PACKAGE_VERSION = "1.0.0"

RULE_SCORER_VERSION = "rule-scorer-1.0.0"
SYNC_SCORER_VERSION = "rule-scorer-sync-1.0.0"
DEFAULT_DATASET_VERSION = "default-vi-2024.1"
