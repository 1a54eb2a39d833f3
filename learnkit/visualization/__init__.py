"""
Visualization utilities for training curves and evaluation scores.
"""

from .training import (
    exponential_moving_average,
    plot_loss_history,
    plot_metric_scores,
)

__all__ = [
    "exponential_moving_average",
    "plot_loss_history",
    "plot_metric_scores",
]
