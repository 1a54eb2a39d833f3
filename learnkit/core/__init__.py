"""
Core learning components: dataset model, loss functions, layers and errors.

These are the building blocks every classifier in ``learnkit.models`` is
assembled from.
"""

from .data import DataPoint, Dataset
from .errors import (
    LearnKitError,
    PreconditionError,
    ShapeMismatchError,
    CallOrderError,
    MissingColumnError,
)
from .layers import Layer, Dense, Sigmoid, ReLU, ACTIVATIONS
from .losses import LossFunction, MeanSquaredError, BinaryCrossEntropy, get_loss
from .utils import set_seed, make_rng, as_vector

__all__ = [
    # Data
    "DataPoint",
    "Dataset",
    # Errors
    "LearnKitError",
    "PreconditionError",
    "ShapeMismatchError",
    "CallOrderError",
    "MissingColumnError",
    # Layers
    "Layer",
    "Dense",
    "Sigmoid",
    "ReLU",
    "ACTIVATIONS",
    # Losses
    "LossFunction",
    "MeanSquaredError",
    "BinaryCrossEntropy",
    "get_loss",
    # Utils
    "set_seed",
    "make_rng",
    "as_vector",
]
