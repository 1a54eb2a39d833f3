"""Score a trained classifier on a labeled dataset."""

from typing import Dict, Optional, Sequence

from ..core.data import Dataset
from ..models.base import Classifier
from .metrics import Metric, default_metrics


def evaluate(classifier: Classifier, dataset: Dataset, metrics: Optional[Sequence[Metric]] = None) -> Dict[str, float]:
    """Predict every point in ``dataset`` and compute each metric.

    Args:
        classifier: A trained classifier.
        dataset: Labeled points to score against.
        metrics: Metrics to compute; Accuracy, Precision, Recall and F1 by default.

    Returns:
        Mapping from metric name to score.
    """
    metrics = list(metrics) if metrics is not None else default_metrics()
    expected = dataset.labels
    predicted = classifier.predict_many(p.features for p in dataset.points)
    return {metric.name: metric.calculate(expected, predicted) for metric in metrics}
