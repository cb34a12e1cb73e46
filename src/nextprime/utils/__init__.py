"""Utility functions for configuration and result logging."""

from nextprime.utils.io import load_config, save_config, load_jsonl
from nextprime.utils.logging import ResultsLogger

__all__ = [
    "load_config",
    "save_config",
    "load_jsonl",
    "ResultsLogger",
]
