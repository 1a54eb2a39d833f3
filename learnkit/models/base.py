"""Classifier contract shared by gradient-trained and non-gradient models."""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from ..core.data import Dataset


class Classifier(ABC):
    """Common interface for every learnkit classifier.

    Attributes:
        name: Human-readable model name for display.
        hyperparameters: Named values read once at the start of ``train``.
            Callers may change them before training, never during it.
    """

    name: str = "classifier"

    def __init__(self, hyperparameters: Dict[str, float]):
        self.hyperparameters: Dict[str, float] = dict(hyperparameters)

    @abstractmethod
    def train(self, dataset: Dataset) -> None:
        """Fit learned state to ``dataset``. The dataset is not modified."""

    @abstractmethod
    def predict(self, features) -> float:
        """Return the predicted label for one feature vector.

        Untrained models return 0.0 rather than raising.
        """

    def predict_many(self, rows: Iterable) -> List[float]:
        """Predict a label for each feature vector in ``rows``."""
        return [self.predict(row) for row in rows]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(hyperparameters={self.hyperparameters})"
