"""
Sequential feed-forward network trained by backpropagation.

Training is plain per-sample stochastic gradient descent: every point
triggers an immediate parameter update, points are visited in dataset
order every epoch (no shuffling), and the full epoch count always runs.
"""

import logging
from typing import List, Optional

import numpy as np
from tqdm.auto import tqdm

from ..core.data import Dataset
from ..core.layers import Layer
from ..core.losses import LossFunction, MeanSquaredError
from .base import Classifier

logger = logging.getLogger(__name__)


class SequentialModel(Classifier):
    """
    Ordered stack of layers plus one loss function.

    Args:
        layers: Initial layers, applied in order. The model owns them.
        loss_function: Loss used for training; defaults to ``MeanSquaredError``.
        name: Display name.
        show_progress: Show a tqdm progress bar over epochs during ``train``.

    Hyperparameters:
        learning_rate: SGD step size (default 0.01).
        epochs: Number of passes over the dataset (default 100).
    """

    def __init__(
        self,
        layers: Optional[List[Layer]] = None,
        loss_function: Optional[LossFunction] = None,
        name: str = "Deep Neural Network",
        show_progress: bool = True,
    ):
        super().__init__({"learning_rate": 0.01, "epochs": 100})
        self.layers: List[Layer] = list(layers) if layers is not None else []
        self.loss_function = loss_function if loss_function is not None else MeanSquaredError()
        self.name = name
        self.show_progress = show_progress
        self.loss_history: List[float] = []

    def add(self, layer: Layer) -> None:
        """Append a layer to the end of the stack."""
        self.layers.append(layer)

    def predict_raw(self, features) -> np.ndarray:
        """
        Run ``features`` through every layer and return the final output vector.

        Does not touch weights, but refreshes each layer's cached input/output.
        """
        signal = np.asarray(features, dtype=float)
        for layer in self.layers:
            signal = layer.forward(signal)
        return signal

    def predict(self, features) -> float:
        """
        Single output: 1.0 if it is >= 0.5, else 0.0.
        Multiple outputs: index of the largest value (first index wins ties).
        """
        if not self.layers:
            return 0.0
        output = self.predict_raw(features)
        if output.shape[0] == 1:
            return 1.0 if output[0] >= 0.5 else 0.0
        return float(np.argmax(output))

    def _target(self, label: float, size: int) -> np.ndarray:
        if size == 1:
            return np.array([label])
        target = np.zeros(size)
        slot = int(round(label))
        if 0 <= slot < size:
            target[slot] = 1.0
        return target

    def train(self, dataset: Dataset) -> None:
        """
        Train on ``dataset`` for ``epochs`` epochs at ``learning_rate``.

        Hyperparameters are read once here and stay fixed for the whole run.
        ``loss_history`` receives the mean per-point loss of each epoch.
        """
        epochs = int(self.hyperparameters["epochs"])
        learning_rate = float(self.hyperparameters["learning_rate"])
        self.loss_history = []
        logger.info(
            "Training %s: %d layers, loss=%s, epochs=%d, learning_rate=%g, samples=%d",
            self.name, len(self.layers), self.loss_function.name, epochs, learning_rate, len(dataset),
        )

        pbar = tqdm(range(epochs), desc=f"Training {self.name}", leave=False, ncols=80,
                    disable=not self.show_progress)
        for epoch in pbar:
            total_error = 0.0
            for point in dataset.points:
                # 1. forward pass
                prediction = self.predict_raw(point.features)
                target = self._target(point.label, prediction.shape[0])

                # 2. output gradient from the loss derivative
                output_grad = np.empty_like(prediction)
                for i in range(prediction.shape[0]):
                    output_grad[i] = self.loss_function.derivative(prediction[i], target[i])
                    total_error += self.loss_function.loss(prediction[i], target[i])

                # 3. backward pass, last layer first
                grad = output_grad
                for layer in reversed(self.layers):
                    grad = layer.backward(grad, learning_rate)

            epoch_loss = total_error / max(1, len(dataset))
            self.loss_history.append(epoch_loss)
            logger.debug("Epoch %d/%d loss=%.6f", epoch + 1, epochs, epoch_loss)
            pbar.set_postfix({"loss": f"{epoch_loss:.4f}"})

        if self.loss_history:
            logger.info("Finished training %s: final loss=%.6f", self.name, self.loss_history[-1])

    def __repr__(self) -> str:
        layers = ", ".join(repr(layer) for layer in self.layers)
        return f"SequentialModel([{layers}], loss={self.loss_function!r})"
