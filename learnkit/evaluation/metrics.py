"""
Classification metrics.

Precision, Recall and F1 are macro-averaged: computed per class, then
averaged over the distinct classes found in ``expected`` (ascending). A class
whose denominator is zero contributes 0 to the average. Accuracy is a single
global fraction. Empty inputs score 0.0.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from .confusion import LABEL_TOLERANCE, check_lengths, confusion_for_class, unique_classes


def _macro_average(expected, predicted, score) -> float:
    expected, predicted = check_lengths(expected, predicted)
    classes = unique_classes(expected)
    if not classes:
        return 0.0
    total = sum(score(confusion_for_class(expected, predicted, c)) for c in classes)
    return total / len(classes)


def precision_score(expected: Sequence[float], predicted: Sequence[float]) -> float:
    return _macro_average(expected, predicted, lambda cm: cm.precision)


def recall_score(expected: Sequence[float], predicted: Sequence[float]) -> float:
    return _macro_average(expected, predicted, lambda cm: cm.recall)


def f1_score(expected: Sequence[float], predicted: Sequence[float]) -> float:
    """Mean over classes of the harmonic mean of per-class precision and recall."""
    return _macro_average(expected, predicted, lambda cm: cm.f1)


def accuracy_score(expected: Sequence[float], predicted: Sequence[float]) -> float:
    """Fraction of samples whose prediction is within tolerance of the label."""
    expected, predicted = check_lengths(expected, predicted)
    if expected.shape[0] == 0:
        return 0.0
    return float(np.mean(np.abs(expected - predicted) < LABEL_TOLERANCE))


class Metric(ABC):
    """A named score computed from parallel true/predicted label arrays."""

    name: str = "metric"

    @abstractmethod
    def calculate(self, expected: Sequence[float], predicted: Sequence[float]) -> float:
        pass

    def __call__(self, expected, predicted) -> float:
        return self.calculate(expected, predicted)


class Precision(Metric):
    name = "Precision"

    def calculate(self, expected, predicted):
        return precision_score(expected, predicted)


class Recall(Metric):
    name = "Recall"

    def calculate(self, expected, predicted):
        return recall_score(expected, predicted)


class F1Score(Metric):
    name = "F1 Score (Macro)"

    def calculate(self, expected, predicted):
        return f1_score(expected, predicted)


class Accuracy(Metric):
    name = "Accuracy"

    def calculate(self, expected, predicted):
        return accuracy_score(expected, predicted)


def default_metrics():
    return [Accuracy(), Precision(), Recall(), F1Score()]
