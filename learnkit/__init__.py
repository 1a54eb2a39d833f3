"""
learnkit: a small supervised-learning toolkit.

Sub-packages:
- core: dataset model, loss functions, layers, errors, random-source helpers
- models: the classifier contract and its implementations
- evaluation: confusion tallies and macro-averaged metrics
- config: hyperparameter dataclasses and YAML experiment configuration
- datasets: CSV ingestion
- training: train/evaluate runner and run artifact management
- visualization: loss curves and metric plots
"""

__version__ = "0.1.0"
