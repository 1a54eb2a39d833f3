"""
Training visualization and plotting functionality.

Loss curves for gradient-trained models and bar charts of evaluation scores.
"""

from typing import Dict, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np


def exponential_moving_average(values: Sequence[float], alpha: float = 0.3) -> np.ndarray:
    """EMA of a per-epoch series; ``smoothed[i] = alpha * x[i] + (1 - alpha) * smoothed[i - 1]``."""
    losses = np.asarray(values, dtype=float)
    if losses.size < 2:
        return losses
    smoothed = np.empty_like(losses)
    smoothed[0] = losses[0]
    for epoch in range(1, losses.size):
        smoothed[epoch] = alpha * losses[epoch] + (1 - alpha) * smoothed[epoch - 1]
    return smoothed


def plot_loss_history(
    loss_history: Sequence[float],
    title: str = "Training Loss",
    save_path: Optional[str] = None,
    smooth: bool = True,
    alpha: float = 0.3,
) -> plt.Figure:
    """
    Plot per-epoch training loss, with an optional smoothed overlay.

    Args:
        loss_history: Mean loss per epoch
        title: Axes title
        save_path: Optional path to save the plot
        smooth: Whether to overlay an EMA-smoothed curve
        alpha: EMA smoothing factor

    Returns:
        Matplotlib figure object
    """
    fig, ax = plt.subplots(figsize=(8, 4))
    epochs = np.arange(1, len(loss_history) + 1)
    ax.plot(epochs, loss_history, color="#4C78A8", alpha=0.4 if smooth else 1.0, label="loss")
    if smooth and len(loss_history) > 1:
        ax.plot(epochs, exponential_moving_average(loss_history, alpha), color="#4C78A8", label="loss (EMA)")
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Loss")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig


def plot_metric_scores(
    scores: Dict[str, float],
    title: str = "Evaluation",
    save_path: Optional[str] = None,
) -> plt.Figure:
    """
    Bar chart of metric scores in [0, 1].

    Args:
        scores: Mapping of metric name to score
        title: Axes title
        save_path: Optional path to save the plot

    Returns:
        Matplotlib figure object
    """
    fig, ax = plt.subplots(figsize=(6, 4))
    names = list(scores.keys())
    values = [scores[n] for n in names]
    bars = ax.bar(names, values, color="#54A24B")
    for bar, value in zip(bars, values):
        ax.text(bar.get_x() + bar.get_width() / 2, value + 0.01, f"{value:.3f}", ha="center", va="bottom", fontsize=9)
    ax.set_ylim(0, 1.1)
    ax.set_ylabel("Score")
    ax.set_title(title)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig
