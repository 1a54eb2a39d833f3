"""
Loss functions scoring a scalar prediction against a scalar target.

Mean Squared Error (mse)
Binary Cross-Entropy (bce)

Both are stateless, so a single instance can be shared across models.
"""

from abc import ABC, abstractmethod

import numpy as np


class LossFunction(ABC):
    """Base class for per-element loss functions."""

    name = "loss"

    @abstractmethod
    def loss(self, predicted: float, actual: float) -> float:
        """Return the non-negative loss of ``predicted`` against ``actual``."""

    @abstractmethod
    def derivative(self, predicted: float, actual: float) -> float:
        """Return d(loss)/d(predicted)."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class MeanSquaredError(LossFunction):
    """
    Squared error, usable with any real-valued target.
    """

    name = "mse"

    def loss(self, predicted, actual):
        return float((predicted - actual) ** 2)

    def derivative(self, predicted, actual):
        return float(2.0 * (predicted - actual))


class BinaryCrossEntropy(LossFunction):
    """
    Binary cross-entropy for a probability ``predicted`` and a target in {0, 1}.

    The prediction is clipped to [epsilon, 1 - epsilon] before use, so
    neither log(0) nor a division by zero can occur.
    """

    name = "bce"
    epsilon = 1e-15

    def _clip(self, predicted):
        return float(np.clip(predicted, self.epsilon, 1.0 - self.epsilon))

    def loss(self, predicted, actual):
        p = self._clip(predicted)
        return float(-(actual * np.log(p) + (1.0 - actual) * np.log(1.0 - p)))

    def derivative(self, predicted, actual):
        # -(y/p) + (1-y)/(1-p) simplified
        p = self._clip(predicted)
        return float((p - actual) / (p * (1.0 - p)))


LOSSES = {
    MeanSquaredError.name: MeanSquaredError,
    BinaryCrossEntropy.name: BinaryCrossEntropy,
}


def get_loss(name: str) -> LossFunction:
    """Instantiate a loss function by short name (``"mse"`` or ``"bce"``)."""
    try:
        return LOSSES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown loss function: {name!r} (choices: {sorted(LOSSES)})")
