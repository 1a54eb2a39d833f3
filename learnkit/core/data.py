"""Labeled dataset model shared by every classifier.

A ``Dataset`` is an ordered tuple of ``DataPoint`` objects plus optional
feature names. It is frozen once built: neither the points nor the names
can be swapped or extended, and ``split`` returns two fresh datasets.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import ShapeMismatchError
from .utils import make_rng


@dataclass(frozen=True, eq=False)
class DataPoint:
    """One labeled sample.

    Attributes:
        features: Feature vector as a read-only float array.
        label: Class index (0, 1, 2, ...) for classification, or any real
            value for regression-style losses.
    """
    features: np.ndarray
    label: float

    def __post_init__(self):
        features = np.array(self.features, dtype=float).reshape(-1)
        features.setflags(write=False)
        object.__setattr__(self, "features", features)
        object.__setattr__(self, "label", float(self.label))


@dataclass(frozen=True, eq=False)
class Dataset:
    """Ordered collection of labeled feature vectors.

    All points must share the same feature-vector length, and when feature
    names are given their count must match it.
    """
    points: Tuple[DataPoint, ...] = field(default_factory=tuple)
    feature_names: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "feature_names", tuple(self.feature_names))
        if not self.points:
            return
        width = self.points[0].features.shape[0]
        for point in self.points[1:]:
            if point.features.shape[0] != width:
                raise ShapeMismatchError("Dataset feature vector", width, point.features.shape[0])
        if self.feature_names and len(self.feature_names) != width:
            raise ShapeMismatchError("Dataset feature names", width, len(self.feature_names))

    @classmethod
    def from_arrays(cls, X, y, feature_names: Optional[Sequence[str]] = None) -> "Dataset":
        """Build a dataset from a 2-D feature array and a 1-D label array."""
        X = np.asarray(X, dtype=float)
        y = np.asarray(y, dtype=float).reshape(-1)
        if X.ndim == 1:
            X = X.reshape(-1, 1)
        if len(X) != len(y):
            raise ShapeMismatchError("Dataset labels", len(X), len(y))
        points = [DataPoint(features=row, label=label) for row, label in zip(X, y)]
        return cls(points=points, feature_names=tuple(feature_names or ()))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.points)

    @property
    def feature_count(self) -> int:
        """Length of each feature vector, or 0 for an empty dataset."""
        return self.points[0].features.shape[0] if self.points else 0

    @property
    def features(self) -> np.ndarray:
        """All feature vectors stacked into an ``(n_samples, n_features)`` array."""
        if not self.points:
            return np.empty((0, 0))
        return np.vstack([p.features for p in self.points])

    @property
    def labels(self) -> np.ndarray:
        return np.array([p.label for p in self.points], dtype=float)

    def split(self, train_ratio: float, rng: Optional[np.random.Generator] = None) -> Tuple["Dataset", "Dataset"]:
        """Shuffle and partition into disjoint train and test datasets.

        The train part holds ``floor(train_ratio * len(self))`` points and the
        test part holds the rest, so no point is lost or duplicated.

        Args:
            train_ratio: Fraction of points assigned to training, in ``(0, 1)``.
            rng: Random source for the shuffle; a fresh unseeded one if omitted.

        Returns:
            Tuple ``(train, test)`` of new datasets sharing the feature names.

        Raises:
            ValueError: If ``train_ratio`` is not strictly between 0 and 1.
        """
        if not 0.0 < train_ratio < 1.0:
            raise ValueError(f"train_ratio must be in (0, 1), got {train_ratio}")
        rng = rng if rng is not None else make_rng()
        order = rng.permutation(len(self.points))
        shuffled = [self.points[i] for i in order]
        train_count = int(np.floor(len(shuffled) * train_ratio))
        return (
            Dataset(points=shuffled[:train_count], feature_names=self.feature_names),
            Dataset(points=shuffled[train_count:], feature_names=self.feature_names),
        )
