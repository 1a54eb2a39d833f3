import math

import numpy as np
import pytest

from learnkit.core import BinaryCrossEntropy, MeanSquaredError, get_loss


def _numeric_derivative(fn, predicted, actual, h=1e-6):
    return (fn(predicted + h, actual) - fn(predicted - h, actual)) / (2 * h)


def test_mse_value_and_derivative():
    mse = MeanSquaredError()
    assert mse.loss(3.0, 1.0) == pytest.approx(4.0)
    assert mse.derivative(3.0, 1.0) == pytest.approx(4.0)
    assert mse.loss(1.0, 1.0) == 0.0


def test_mse_derivative_matches_finite_difference():
    mse = MeanSquaredError()
    rng = np.random.default_rng(0)
    for predicted, actual in rng.uniform(-10, 10, size=(25, 2)):
        numeric = _numeric_derivative(mse.loss, predicted, actual)
        assert mse.derivative(predicted, actual) == pytest.approx(numeric, abs=1e-4)


def test_bce_derivative_matches_finite_difference_inside_clip_range():
    bce = BinaryCrossEntropy()
    rng = np.random.default_rng(1)
    for predicted in rng.uniform(0.05, 0.95, size=20):
        for actual in (0.0, 1.0):
            numeric = _numeric_derivative(bce.loss, predicted, actual)
            assert bce.derivative(predicted, actual) == pytest.approx(numeric, rel=1e-4)


@pytest.mark.parametrize("predicted", [0.0, 1.0])
@pytest.mark.parametrize("actual", [0.0, 1.0])
def test_bce_is_finite_at_probability_extremes(predicted, actual):
    bce = BinaryCrossEntropy()
    loss = bce.loss(predicted, actual)
    grad = bce.derivative(predicted, actual)
    assert math.isfinite(loss) and loss >= 0.0
    assert math.isfinite(grad)


def test_bce_confident_correct_prediction_has_small_loss():
    bce = BinaryCrossEntropy()
    assert bce.loss(0.999, 1.0) < bce.loss(0.6, 1.0)
    assert bce.loss(0.001, 0.0) < 0.01


def test_get_loss_by_name():
    assert isinstance(get_loss("mse"), MeanSquaredError)
    assert isinstance(get_loss("BCE"), BinaryCrossEntropy)
    with pytest.raises(ValueError):
        get_loss("hinge")
