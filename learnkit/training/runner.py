"""
Split, train and evaluate a classifier in one call.

This is the workflow the CLI and notebooks share: it owns the random
source for the split and reports sizes, timing and metric scores.
"""

import logging
import time
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from ..core.data import Dataset
from ..evaluation.evaluate import evaluate
from ..evaluation.metrics import Metric
from ..models.base import Classifier

logger = logging.getLogger(__name__)


def train_and_evaluate(
    classifier: Classifier,
    dataset: Dataset,
    train_ratio: float = 0.8,
    rng: Optional[np.random.Generator] = None,
    metrics: Optional[Sequence[Metric]] = None,
) -> Tuple[Dict[str, Any], Dataset, Dataset]:
    """
    Split ``dataset``, train ``classifier`` on the train part, score it on the test part.

    Args:
        classifier: An untrained classifier.
        dataset: Full labeled dataset.
        train_ratio: Fraction used for training, in (0, 1).
        rng: Random source for the split shuffle.
        metrics: Metrics to report; the default set when omitted.

    Returns:
        Tuple of (results, train, test). ``results`` holds ``model``,
        ``hyperparameters``, ``train_size``, ``test_size``, ``train_time``,
        ``metrics`` and, for gradient-trained models, ``final_loss``.
    """
    train, test = dataset.split(train_ratio, rng=rng)
    logger.info("Split %d points into train=%d test=%d", len(dataset), len(train), len(test))

    start = time.time()
    classifier.train(train)
    train_time = time.time() - start

    scores = evaluate(classifier, test, metrics)
    for name, value in scores.items():
        logger.info("%s: %s=%.4f", classifier.name, name, value)

    results: Dict[str, Any] = {
        "model": classifier.name,
        "hyperparameters": dict(classifier.hyperparameters),
        "train_size": len(train),
        "test_size": len(test),
        "train_time": train_time,
        "metrics": scores,
    }
    history = getattr(classifier, "loss_history", None)
    if history:
        results["final_loss"] = history[-1]
    return results, train, test
