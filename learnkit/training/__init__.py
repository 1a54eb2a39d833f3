"""
Training workflow: split/train/evaluate runner and run artifact management.
"""

from .runner import train_and_evaluate
from .run_manager import (
    create_run_directory,
    save_run_artifacts,
    display_run_summary,
)

__all__ = [
    "train_and_evaluate",
    "create_run_directory",
    "save_run_artifacts",
    "display_run_summary",
]
