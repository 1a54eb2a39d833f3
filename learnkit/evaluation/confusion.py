"""One-vs-rest confusion tallies shared by the macro-averaged metrics.

Labels are floats, so class membership is decided with an absolute
tolerance of ``LABEL_TOLERANCE`` rather than exact equality.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..core.errors import ShapeMismatchError

LABEL_TOLERANCE = 0.1


@dataclass(frozen=True)
class ConfusionCounts:
    """True/false positive/negative counts for one class against the rest."""
    tp: int
    tn: int
    fp: int
    fn: int

    @property
    def precision(self) -> float:
        """TP / (TP + FP), or 0.0 when nothing was predicted positive."""
        return self.tp / (self.tp + self.fp) if (self.tp + self.fp) > 0 else 0.0

    @property
    def recall(self) -> float:
        """TP / (TP + FN), or 0.0 when the class never occurs."""
        return self.tp / (self.tp + self.fn) if (self.tp + self.fn) > 0 else 0.0

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return 2 * p * r / (p + r) if (p + r) > 0 else 0.0


def check_lengths(expected: Sequence[float], predicted: Sequence[float]):
    """Convert both label arrays to float vectors of equal length."""
    expected = np.asarray(expected, dtype=float).reshape(-1)
    predicted = np.asarray(predicted, dtype=float).reshape(-1)
    if expected.shape[0] != predicted.shape[0]:
        raise ShapeMismatchError("Metric label arrays", expected.shape[0], predicted.shape[0])
    return expected, predicted


def confusion_for_class(expected: Sequence[float], predicted: Sequence[float], target_class: float) -> ConfusionCounts:
    """Tally the one-vs-rest confusion counts of ``target_class``.

    A sample that is neither actually nor predictedly ``target_class`` is a
    true negative and is counted in ``tn``.
    """
    expected, predicted = check_lengths(expected, predicted)
    actual_pos = np.abs(expected - target_class) < LABEL_TOLERANCE
    pred_pos = np.abs(predicted - target_class) < LABEL_TOLERANCE
    return ConfusionCounts(
        tp=int(np.sum(actual_pos & pred_pos)),
        tn=int(np.sum(~actual_pos & ~pred_pos)),
        fp=int(np.sum(~actual_pos & pred_pos)),
        fn=int(np.sum(actual_pos & ~pred_pos)),
    )


def unique_classes(expected: Sequence[float]) -> List[float]:
    """Distinct labels in ``expected``, ascending."""
    return sorted(set(float(v) for v in np.asarray(expected, dtype=float).reshape(-1)))
