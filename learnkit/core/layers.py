"""
Differentiable layers composed by the sequential model.

Every layer caches the input it last saw and the output it last produced;
``backward`` relies on that cache, so ``forward`` must run first on the same
layer. Layers are single-threaded and call-order dependent by contract.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from .errors import CallOrderError
from .utils import as_vector, make_rng


class Layer(ABC):
    """
    Base class for layers.

    Attributes:
        input: Input vector from the latest ``forward`` call, or ``None``.
        output: Output vector from the latest ``forward`` call, or ``None``.
    """

    def __init__(self):
        self.input: Optional[np.ndarray] = None
        self.output: Optional[np.ndarray] = None

    @abstractmethod
    def forward(self, inputs) -> np.ndarray:
        """Forward pass."""

    @abstractmethod
    def backward(self, grad, learning_rate: float) -> np.ndarray:
        """Backward pass; returns the gradient w.r.t. this layer's input."""

    def _require_forward(self) -> None:
        if self.input is None or self.output is None:
            raise CallOrderError(self.__class__.__name__)

    def _check_grad(self, grad) -> np.ndarray:
        return as_vector(grad, f"{self.__class__.__name__} output gradient", self.output.shape[0])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Dense(Layer):
    """
    Fully connected layer: ``output = weights @ input + biases``.

    ``weights`` has shape ``(output_size, input_size)`` and ``biases`` has
    shape ``(output_size,)``. Both are updated in place by ``backward`` and
    their shapes never change.

    Weights are drawn uniformly from [-1, 1) and scaled by
    ``1 / sqrt(input_size)`` (Xavier/Glorot style); biases start at zero.

    Args:
        input_size: Length of the input vector.
        output_size: Length of the output vector.
        rng: Random source for initialisation; a fresh unseeded one if omitted.
    """

    def __init__(self, input_size: int, output_size: int, rng: Optional[np.random.Generator] = None):
        super().__init__()
        if input_size < 1 or output_size < 1:
            raise ValueError(f"Dense sizes must be positive, got {input_size}->{output_size}")
        self.input_size = int(input_size)
        self.output_size = int(output_size)
        rng = rng if rng is not None else make_rng()
        self.weights = rng.uniform(-1.0, 1.0, size=(self.output_size, self.input_size)) / np.sqrt(self.input_size)
        self.biases = np.zeros(self.output_size)

    def forward(self, inputs):
        self.input = as_vector(inputs, "Dense input", self.input_size)
        self.output = self.weights @ self.input + self.biases
        return self.output

    def backward(self, grad, learning_rate):
        """
        Propagate ``grad`` to the previous layer and apply the SGD update.

        The upstream gradient is computed from the weights as they were
        before this call's update.
        """
        self._require_forward()
        grad = self._check_grad(grad)
        input_grad = self.weights.T @ grad
        self.weights -= learning_rate * np.outer(grad, self.input)
        self.biases -= learning_rate * grad
        return input_grad

    def __repr__(self) -> str:
        return f"Dense({self.input_size}, {self.output_size})"


class Sigmoid(Layer):
    """
    Sigmoid activation, applied elementwise.

    Outputs stay strictly inside (0, 1): values that would round to 0.0 or
    1.0 in float64 are pinned to the nearest representable neighbour.
    """

    LOWER = np.nextafter(0.0, 1.0)
    UPPER = np.nextafter(1.0, 0.0)

    def forward(self, inputs):
        self.input = as_vector(inputs, "Sigmoid input")
        # clip keeps exp() from overflowing for very negative inputs
        raw = 1.0 / (1.0 + np.exp(-np.clip(self.input, -500, 500)))
        self.output = np.clip(raw, self.LOWER, self.UPPER)
        return self.output

    def backward(self, grad, learning_rate):
        self._require_forward()
        grad = self._check_grad(grad)
        return grad * (self.output * (1.0 - self.output))


class ReLU(Layer):
    """
    ReLU (Rectified Linear Unit) activation, applied elementwise.
    """

    def forward(self, inputs):
        self.input = as_vector(inputs, "ReLU input")
        self.output = np.maximum(0.0, self.input)
        return self.output

    def backward(self, grad, learning_rate):
        self._require_forward()
        grad = self._check_grad(grad)
        return grad * (self.output > 0).astype(float)


ACTIVATIONS = {
    "sigmoid": Sigmoid,
    "relu": ReLU,
}
