"""K-Nearest-Neighbors classifier."""

from collections import Counter
from typing import List, Optional

import numpy as np

from ..core.data import DataPoint, Dataset
from ..core.utils import as_vector
from .base import Classifier


class KNNClassifier(Classifier):
    """Majority vote among the ``k`` training points closest in Euclidean distance.

    ``train`` only keeps a reference to the training points. On a tie between
    label groups, the group whose first member is nearest wins.

    Hyperparameters:
        k: Number of neighbours consulted (default 3).
    """

    name = "K-Nearest Neighbors"

    def __init__(self, k: int = 3):
        super().__init__({"k": k})
        self._points: Optional[List[DataPoint]] = None
        self._features: Optional[np.ndarray] = None

    def train(self, dataset: Dataset) -> None:
        self._points = dataset.points
        self._features = dataset.features if dataset.points else None

    def predict(self, features) -> float:
        if not self._points:
            return 0.0
        k = int(self.hyperparameters["k"])
        x = as_vector(features, "KNN feature vector", self._features.shape[1])

        distances = np.sqrt(np.sum((self._features - x) ** 2, axis=1))
        nearest = np.argsort(distances, kind="stable")[:max(k, 0)]
        if nearest.size == 0:
            return 0.0

        # Counter keeps first-seen order for equal counts
        votes = Counter(self._points[i].label for i in nearest)
        return float(votes.most_common(1)[0][0])
