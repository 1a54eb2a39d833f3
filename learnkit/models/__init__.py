"""
Classifiers: a shared contract with gradient-trained and non-gradient variants.
"""

from .base import Classifier
from .sequential import SequentialModel
from .knn import KNNClassifier
from .naive_bayes import NaiveBayes
from .factory import build_classifier, build_sequential, CLASSIFIER_NAMES

__all__ = [
    "Classifier",
    "SequentialModel",
    "KNNClassifier",
    "NaiveBayes",
    "build_classifier",
    "build_sequential",
    "CLASSIFIER_NAMES",
]
