"""Two-class Gaussian Naive Bayes classifier."""

from typing import Optional

import numpy as np

from ..core.data import Dataset
from ..core.errors import PreconditionError
from ..core.utils import as_vector
from .base import Classifier

# added to every variance so a constant feature cannot produce a zero-width Gaussian
VARIANCE_SMOOTHING = 1e-9


def _log_gaussian(x: np.ndarray, mean: np.ndarray, var: np.ndarray) -> np.ndarray:
    var = var + VARIANCE_SMOOTHING
    return -0.5 * np.log(2.0 * np.pi * var) - (x - mean) ** 2 / (2.0 * var)


class NaiveBayes(Classifier):
    """
    Gaussian Naive Bayes for labels {0, 1}.

    Any label other than 0 is treated as class 1. Features are assumed
    independent given the class; each is modelled by a per-class normal
    distribution.

    After ``train`` only per-class priors, means and variances are kept.
    An empty class gets prior 0, so its log-score is -inf and the other
    class always wins.
    """

    name = "Naive-Bayes"

    def __init__(self):
        super().__init__({})
        self.priors: Optional[np.ndarray] = None
        self.means: Optional[np.ndarray] = None
        self.variances: Optional[np.ndarray] = None

    def train(self, dataset: Dataset) -> None:
        if not dataset.points:
            self.priors = self.means = self.variances = None
            return
        X = dataset.features
        is_one = dataset.labels != 0
        groups = (X[~is_one], X[is_one])

        self.priors = np.array([len(g) / len(X) for g in groups])
        means, variances = [], []
        for group in groups:
            count = max(len(group), 1)
            mean = group.sum(axis=0) / count
            variances.append(((group - mean) ** 2).sum(axis=0) / count)
            means.append(mean)
        self.means = np.vstack(means)
        self.variances = np.vstack(variances)

    def log_scores(self, features) -> np.ndarray:
        """Return ``[log P(class 0) p(x | 0), log P(class 1) p(x | 1)]``."""
        if self.priors is None:
            raise PreconditionError("NaiveBayes.log_scores() called before train()")
        x = as_vector(features, "Naive Bayes feature vector", self.means.shape[1])
        with np.errstate(divide="ignore"):
            log_priors = np.log(self.priors)
        return log_priors + np.array([
            _log_gaussian(x, self.means[c], self.variances[c]).sum() for c in (0, 1)
        ])

    def predict(self, features) -> float:
        if self.priors is None:
            return 0.0
        score0, score1 = self.log_scores(features)
        return 1.0 if score1 > score0 else 0.0
