"""Construct classifiers by name from configuration dataclasses."""

from typing import Optional, Sequence, Union

import numpy as np

from ..config.training import KNNConfig, NaiveBayesConfig, SequentialConfig
from ..core.layers import ACTIVATIONS, Dense, Sigmoid
from ..core.losses import get_loss
from ..core.utils import make_rng
from .base import Classifier
from .knn import KNNClassifier
from .naive_bayes import NaiveBayes
from .sequential import SequentialModel

ModelConfig = Union[SequentialConfig, KNNConfig, NaiveBayesConfig]

CLASSIFIER_NAMES = ("sequential", "knn", "naive_bayes")


def build_sequential(
    input_size: int,
    config: Optional[SequentialConfig] = None,
    output_size: int = 1,
    rng: Optional[np.random.Generator] = None,
    show_progress: bool = True,
) -> SequentialModel:
    """Build a Dense/activation stack for ``input_size`` features.

    Hidden layers follow ``config.hidden_sizes``, each followed by
    ``config.activation``. A single-output head ends in Sigmoid so its output
    reads as a probability; a multi-output head is left linear for argmax.

    Args:
        input_size: Number of input features.
        config: Architecture and hyperparameters; defaults to ``SequentialConfig()``.
        output_size: 1 for binary decisions, the class count for multi-class.
        rng: Random source for weight init; seeded from ``config.seed`` if omitted.
        show_progress: Forwarded to ``SequentialModel``.
    """
    config = config or SequentialConfig()
    if config.activation not in ACTIVATIONS:
        raise ValueError(f"Unknown activation: {config.activation!r} (choices: {sorted(ACTIVATIONS)})")
    rng = rng if rng is not None else make_rng(config.seed)
    activation = ACTIVATIONS[config.activation]

    model = SequentialModel(loss_function=get_loss(config.loss), show_progress=show_progress)
    width = input_size
    for hidden in config.hidden_sizes:
        model.add(Dense(width, hidden, rng=rng))
        model.add(activation())
        width = hidden
    model.add(Dense(width, output_size, rng=rng))
    if output_size == 1:
        model.add(Sigmoid())
    model.hyperparameters.update(config.to_hyperparameters())
    return model


def build_classifier(
    name: str,
    config: Optional[ModelConfig] = None,
    input_size: Optional[int] = None,
    output_size: int = 1,
    rng: Optional[np.random.Generator] = None,
    show_progress: bool = True,
) -> Classifier:
    """Return an untrained classifier of the given kind.

    Args:
        name: One of ``"sequential"``, ``"knn"``, ``"naive_bayes"``.
        config: Matching config dataclass; defaults are used if omitted.
        input_size: Feature count; required for ``"sequential"``.
        output_size: Output width for ``"sequential"``.
        rng: Random source for ``"sequential"`` weight init.
        show_progress: Progress bar toggle for ``"sequential"``.

    Raises:
        ValueError: For an unknown name or a missing ``input_size``.
    """
    key = name.lower().replace("-", "_")
    if key == "sequential":
        if input_size is None:
            raise ValueError("input_size is required to build a sequential model")
        return build_sequential(input_size, config, output_size=output_size, rng=rng,
                                show_progress=show_progress)
    if key == "knn":
        model = KNNClassifier()
        model.hyperparameters.update((config or KNNConfig()).to_hyperparameters())
        return model
    if key == "naive_bayes":
        return NaiveBayes()
    raise ValueError(f"Unknown classifier: {name!r} (choices: {list(CLASSIFIER_NAMES)})")
