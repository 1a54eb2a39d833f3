import dataclasses
import math

import numpy as np
import pytest

from learnkit.core import DataPoint, Dataset, ShapeMismatchError


def _dataset(n: int) -> Dataset:
    return Dataset.from_arrays(np.arange(n * 2, dtype=float).reshape(n, 2), np.arange(n) % 2, ["x1", "x2"])


def test_from_arrays_and_accessors():
    data = _dataset(3)
    assert len(data) == 3
    assert data.feature_count == 2
    assert data.features.shape == (3, 2)
    assert np.array_equal(data.labels, [0.0, 1.0, 0.0])
    assert [p.label for p in data] == [0.0, 1.0, 0.0]


def test_empty_dataset():
    data = Dataset()
    assert len(data) == 0
    assert data.feature_count == 0
    assert data.labels.shape == (0,)


def test_data_point_features_are_read_only():
    point = DataPoint(features=[1.0, 2.0], label=1)
    assert point.label == 1.0
    with pytest.raises(ValueError):
        point.features[0] = 5.0


def test_inconsistent_feature_lengths_rejected():
    with pytest.raises(ShapeMismatchError):
        Dataset(points=[DataPoint([1.0, 2.0], 0), DataPoint([1.0], 1)])


def test_feature_name_count_must_match():
    with pytest.raises(ShapeMismatchError):
        Dataset(points=[DataPoint([1.0, 2.0], 0)], feature_names=["only_one"])


@pytest.mark.parametrize("n", [0, 1, 7, 10, 33])
@pytest.mark.parametrize("ratio", [0.1, 0.5, 0.7, 0.8, 0.99])
def test_split_partitions_without_overlap(n, ratio):
    data = _dataset(n)
    train, test = data.split(ratio, rng=np.random.default_rng(0))
    assert len(train) + len(test) == n
    assert len(train) == math.floor(ratio * n)
    train_ids = {id(p) for p in train}
    test_ids = {id(p) for p in test}
    assert not train_ids & test_ids
    assert train_ids | test_ids == {id(p) for p in data}


def test_split_is_reproducible_with_seeded_rng():
    data = _dataset(20)
    a, _ = data.split(0.5, rng=np.random.default_rng(123))
    b, _ = data.split(0.5, rng=np.random.default_rng(123))
    assert np.array_equal(a.features, b.features)


def test_split_returns_fresh_datasets():
    data = _dataset(10)
    train, test = data.split(0.6, rng=np.random.default_rng(0))
    assert train is not data and test is not data
    assert len(data) == 10
    assert data.feature_names == ("x1", "x2")
    assert train.feature_names == ("x1", "x2")


def test_dataset_is_frozen_after_construction():
    data = _dataset(3)
    assert isinstance(data.points, tuple)
    with pytest.raises(AttributeError):
        data.points.append(DataPoint([1.0], 0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.points = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.feature_names = ("a",)
    assert len(data) == 3


@pytest.mark.parametrize("ratio", [0.0, 1.0, -0.5, 1.5])
def test_split_rejects_ratio_outside_open_interval(ratio):
    with pytest.raises(ValueError):
        _dataset(4).split(ratio)
