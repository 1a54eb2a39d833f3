import numpy as np
import pytest

from learnkit.core import BinaryCrossEntropy, Dataset, Dense, MeanSquaredError, ReLU, ShapeMismatchError, Sigmoid
from learnkit.models import SequentialModel

AND_X = [[0, 0], [0, 1], [1, 0], [1, 1]]
AND_Y = [0, 0, 0, 1]


def _and_dataset() -> Dataset:
    return Dataset.from_arrays(AND_X, AND_Y, feature_names=["a", "b"])


def _constant_head(biases) -> SequentialModel:
    layer = Dense(2, len(biases), rng=np.random.default_rng(0))
    layer.weights[:] = 0.0
    layer.biases[:] = biases
    return SequentialModel([layer], show_progress=False)


def test_defaults():
    model = SequentialModel()
    assert model.hyperparameters == {"learning_rate": 0.01, "epochs": 100}
    assert isinstance(model.loss_function, MeanSquaredError)
    assert model.name == "Deep Neural Network"
    assert model.layers == []


def test_untrained_empty_model_predicts_zero():
    assert SequentialModel().predict([1.0, 2.0]) == 0.0


def test_predict_raw_chains_layers():
    model = SequentialModel([Dense(2, 3, rng=np.random.default_rng(0)), ReLU()])
    out = model.predict_raw([1.0, -1.0])
    assert out.shape == (3,)
    assert np.all(out >= 0.0)


def test_predict_single_output_threshold():
    assert _constant_head([0.5]).predict([3.0, 4.0]) == 1.0
    assert _constant_head([0.49]).predict([3.0, 4.0]) == 0.0


def test_predict_multi_output_argmax_first_index_wins_ties():
    assert _constant_head([0.1, 0.5, 0.5]).predict([0.0, 0.0]) == 1.0
    assert _constant_head([0.9, 0.5, 0.2]).predict([0.0, 0.0]) == 0.0


def test_predict_rejects_wrong_feature_count():
    model = SequentialModel([Dense(2, 1, rng=np.random.default_rng(0))])
    with pytest.raises(ShapeMismatchError):
        model.predict([1.0, 2.0, 3.0])


def test_trains_and_gate_with_bce():
    model = SequentialModel(
        [Dense(2, 1, rng=np.random.default_rng(42)), Sigmoid()],
        loss_function=BinaryCrossEntropy(),
        show_progress=False,
    )
    model.hyperparameters["learning_rate"] = 0.1
    model.hyperparameters["epochs"] = 500
    model.train(_and_dataset())

    assert model.predict([1, 1]) == 1.0
    assert model.predict([0, 0]) == 0.0
    assert len(model.loss_history) == 500
    assert model.loss_history[-1] < model.loss_history[0]


def test_trains_multi_class_one_hot_targets():
    data = Dataset.from_arrays(np.eye(3), [0, 1, 2])
    model = SequentialModel([Dense(3, 3, rng=np.random.default_rng(1))], show_progress=False)
    model.hyperparameters.update({"learning_rate": 0.1, "epochs": 300})
    model.train(data)
    assert model.predict_many(np.eye(3)) == [0.0, 1.0, 2.0]


def test_epoch_count_is_read_at_train_time():
    model = SequentialModel([Dense(2, 1, rng=np.random.default_rng(0)), Sigmoid()], show_progress=False)
    model.hyperparameters["epochs"] = 3
    model.train(_and_dataset())
    assert len(model.loss_history) == 3


def test_zero_epochs_leaves_weights_untouched():
    dense = Dense(2, 1, rng=np.random.default_rng(0))
    before = dense.weights.copy()
    model = SequentialModel([dense], show_progress=False)
    model.hyperparameters["epochs"] = 0
    model.train(_and_dataset())
    assert np.array_equal(dense.weights, before)
    assert model.loss_history == []


def test_training_does_not_mutate_dataset():
    data = _and_dataset()
    features, labels = data.features.copy(), data.labels.copy()
    model = SequentialModel([Dense(2, 1, rng=np.random.default_rng(0)), Sigmoid()], show_progress=False)
    model.hyperparameters["epochs"] = 5
    model.train(data)
    assert np.array_equal(data.features, features)
    assert np.array_equal(data.labels, labels)


def test_training_is_deterministic_for_seeded_weights():
    def run():
        model = SequentialModel([Dense(2, 2, rng=np.random.default_rng(9)), Sigmoid(), Dense(2, 1, rng=np.random.default_rng(10)), Sigmoid()],
                                show_progress=False)
        model.hyperparameters["epochs"] = 20
        model.train(_and_dataset())
        return model.loss_history

    assert run() == run()
