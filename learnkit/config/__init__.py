"""
Configuration management.

This module provides configuration classes and utilities for:
- Classifier hyperparameters and split settings (dataclasses)
- Experiment configuration (YAML-based)
"""

from .training import SequentialConfig, KNNConfig, NaiveBayesConfig, SplitConfig
from .experiment import ExperimentConfig, get_config, DEFAULT_CONFIG_PATH

__all__ = [
    # Training configs
    "SequentialConfig",
    "KNNConfig",
    "NaiveBayesConfig",
    "SplitConfig",
    # Experiment config
    "ExperimentConfig",
    "get_config",
    "DEFAULT_CONFIG_PATH",
]
