#!/usr/bin/env python3
"""Train and evaluate a learnkit classifier on a CSV dataset.

Loads the CSV, splits it into train/test parts, trains the selected
classifier, and prints Accuracy, Precision, Recall and F1 on the test part.
Settings come from a YAML experiment config; command-line flags override it.

Typical usage from the command line:
  python scripts/train_classifier.py --csv data.csv --model knn --k 5
  python scripts/train_classifier.py --config my_experiment.yaml --csv data.csv --save --plots

Outputs (with ``--save``):
- ``<output-dir>/<timestamp>_<model>/{config.json,summary.json,history.csv}``
- ``loss.png`` and ``metrics.png`` in the same directory when ``--plots`` is set
"""

import argparse
import logging
import sys
from dataclasses import asdict, replace
from typing import List

import numpy as np

from learnkit.config import ExperimentConfig
from learnkit.core import make_rng
from learnkit.datasets import dataframe_to_dataset, read_csv
from learnkit.models import CLASSIFIER_NAMES, build_classifier
from learnkit.training import create_run_directory, display_run_summary, save_run_artifacts, train_and_evaluate

logger = logging.getLogger("train_classifier")


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: List of CLI arguments (excluding the program name).

    Returns:
        The populated ``argparse.Namespace`` of parsed options.
    """
    parser = argparse.ArgumentParser(description="Train and evaluate a classifier on a CSV dataset.")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML experiment config (default: the bundled learnkit/config/default.yaml).")
    parser.add_argument("--csv", type=str, default=None, help="CSV file with a header row.")
    parser.add_argument("--label", type=str, default=None,
                        help="Label column (default: last column).")
    parser.add_argument("--features", nargs="*", default=None,
                        help="Feature columns (default: all except the label).")
    parser.add_argument("--model", type=str, default=None, choices=list(CLASSIFIER_NAMES),
                        help="Classifier to train.")
    parser.add_argument("--epochs", type=int, default=None, metavar="N", help="Sequential: epochs.")
    parser.add_argument("--lr", type=float, default=None, metavar="LR", help="Sequential: learning rate.")
    parser.add_argument("--hidden-sizes", type=int, nargs="*", default=None,
                        help="Sequential: hidden layer widths.")
    parser.add_argument("--activation", type=str, default=None, choices=["sigmoid", "relu"],
                        help="Sequential: hidden activation.")
    parser.add_argument("--loss", type=str, default=None, choices=["mse", "bce"], help="Sequential: loss.")
    parser.add_argument("--k", type=int, default=None, help="KNN: number of neighbours.")
    parser.add_argument("--train-ratio", type=float, default=None, help="Fraction of rows used for training.")
    parser.add_argument("--seed", type=int, default=None, metavar="S", help="Random seed.")
    parser.add_argument("--output-dir", type=str, default=None, help="Base directory for run artifacts.")
    parser.add_argument("--save", action="store_true", help="Write run artifacts.")
    parser.add_argument("--plots", action="store_true", help="Render loss/metric plots (requires --save).")
    parser.add_argument("--no-progress", action="store_true", help="Hide the training progress bar.")
    return parser.parse_args(argv)


def main(argv: List[str]) -> int:
    """Entry point for command-line execution.

    Args:
        argv: List of CLI arguments (excluding program name).

    Returns:
        Process exit code where 0 indicates success.
    """
    args = parse_args(argv)
    cfg = ExperimentConfig(args.config)
    logging.basicConfig(level=getattr(logging, str(cfg.log_level).upper(), logging.INFO),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    csv_path = args.csv or cfg.csv_path
    if not csv_path:
        print("No CSV given: pass --csv or set data.csv_path in the config.", file=sys.stderr)
        return 2

    seed = args.seed if args.seed is not None else cfg.random_seed
    model_name = args.model or cfg.model

    df = read_csv(csv_path)
    label = args.label or cfg.label_column or df.columns[-1]
    features = args.features if args.features is not None else cfg.feature_columns
    dataset = dataframe_to_dataset(df, label, features or None)
    logger.info("Loaded %d rows with %d features from %s", len(dataset), dataset.feature_count, csv_path)

    model_cfg = cfg.model_config() if model_name == cfg.model else None
    if model_name == "sequential":
        model_cfg = model_cfg or cfg.sequential
        overrides = {
            "epochs": args.epochs,
            "learning_rate": args.lr,
            "hidden_sizes": tuple(args.hidden_sizes) if args.hidden_sizes is not None else None,
            "activation": args.activation,
            "loss": args.loss,
            "seed": seed,
        }
        model_cfg = replace(model_cfg, **{k: v for k, v in overrides.items() if v is not None})
    elif model_name == "knn":
        model_cfg = model_cfg or cfg.knn
        if args.k is not None:
            model_cfg = replace(model_cfg, k=args.k)

    n_classes = len(np.unique(dataset.labels))
    classifier = build_classifier(
        model_name,
        model_cfg,
        input_size=dataset.feature_count,
        output_size=n_classes if n_classes > 2 else 1,
        show_progress=not args.no_progress,
    )

    split_cfg = cfg.split
    train_ratio = args.train_ratio if args.train_ratio is not None else split_cfg.train_ratio
    split_seed = seed if seed is not None else split_cfg.seed
    results, _, _ = train_and_evaluate(classifier, dataset, train_ratio=train_ratio, rng=make_rng(split_seed))

    saved = []
    if args.save:
        run_dir = create_run_directory(model_name, base_dir=args.output_dir or cfg.output_dir or "runs")
        run_config = {
            "csv_path": str(csv_path),
            "label_column": label,
            "feature_columns": list(dataset.feature_names),
            "model": model_name,
            "model_config": asdict(model_cfg) if model_cfg is not None else {},
            "train_ratio": train_ratio,
            "seed": seed,
        }
        loss_history = getattr(classifier, "loss_history", None)
        save_run_artifacts(run_dir, run_config, results, loss_history)
        if args.plots:
            from learnkit.visualization import plot_loss_history, plot_metric_scores
            if loss_history:
                plot_loss_history(loss_history, save_path=str(run_dir / "loss.png"))
            plot_metric_scores(results["metrics"], title=classifier.name, save_path=str(run_dir / "metrics.png"))
        saved.append(run_dir)

    display_run_summary([results], saved)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
