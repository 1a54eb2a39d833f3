"""
Evaluation: one-vs-rest confusion tallies and macro-averaged metrics.
"""

from .confusion import ConfusionCounts, confusion_for_class, unique_classes, LABEL_TOLERANCE
from .metrics import (
    Metric,
    Accuracy,
    Precision,
    Recall,
    F1Score,
    accuracy_score,
    precision_score,
    recall_score,
    f1_score,
    default_metrics,
)
from .evaluate import evaluate

__all__ = [
    "ConfusionCounts",
    "confusion_for_class",
    "unique_classes",
    "LABEL_TOLERANCE",
    "Metric",
    "Accuracy",
    "Precision",
    "Recall",
    "F1Score",
    "accuracy_score",
    "precision_score",
    "recall_score",
    "f1_score",
    "default_metrics",
    "evaluate",
]
