"""Configuration dataclasses for classifier hyperparameters and dataset splits.

These dataclasses centralize the defaults each classifier starts from,
while remaining explicit and overrideable via code, YAML, or CLI adapters.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class SequentialConfig:
    """Sequential network configuration.

    Attributes:
        epochs: Number of passes over the training data.
        learning_rate: SGD step size.
        hidden_sizes: Widths of hidden Dense layers; empty means a single Dense head.
        activation: Hidden activation name: "sigmoid" or "relu".
        loss: Loss function name: "mse" or "bce".
        seed: Weight-initialisation seed; ``None`` leaves it unseeded.
    """
    epochs: int = 100
    learning_rate: float = 0.01
    hidden_sizes: Tuple[int, ...] = field(default_factory=tuple)
    activation: str = "sigmoid"  # "sigmoid", "relu"
    loss: str = "mse"  # "mse", "bce"
    seed: Optional[int] = None

    def to_hyperparameters(self) -> Dict[str, float]:
        return {"epochs": self.epochs, "learning_rate": self.learning_rate}


@dataclass
class KNNConfig:
    """K-Nearest-Neighbors configuration.

    Attributes:
        k: Number of neighbours that vote.
    """
    k: int = 3

    def to_hyperparameters(self) -> Dict[str, float]:
        return {"k": self.k}


@dataclass
class NaiveBayesConfig:
    """Naive Bayes has no tunable hyperparameters."""

    def to_hyperparameters(self) -> Dict[str, float]:
        return {}


@dataclass
class SplitConfig:
    """Train/test split configuration.

    Attributes:
        train_ratio: Fraction of points used for training, in (0, 1).
        seed: Shuffle seed; ``None`` leaves it unseeded.
    """
    train_ratio: float = 0.8
    seed: Optional[int] = None
