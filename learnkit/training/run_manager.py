"""
Run management functionality for experiment tracking and artifact saving.

This module handles the creation of run directories and the saving of
configuration, summary metrics and loss history for reproducible experiments.
Trained model parameters are not saved.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd


def create_run_directory(run_name: str, base_dir: str = "runs") -> Path:
    """
    Create a timestamped directory for saving run artifacts.

    Args:
        run_name: Name of the current run
        base_dir: Base directory for storing runs

    Returns:
        Path to the created run directory
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(base_dir) / f"{timestamp}_{run_name}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def save_run_artifacts(
    run_dir: Path,
    run_config: Dict[str, Any],
    run_results: Dict[str, Any],
    loss_history: Optional[Sequence[float]] = None,
) -> Path:
    """
    Save all artifacts for a training run.

    Writes ``config.json``, ``summary.json`` and, when a loss history is
    given, ``history.csv`` with ``epoch`` and ``loss`` columns.

    Args:
        run_dir: Directory to save artifacts to
        run_config: Configuration used for this run
        run_results: Results dictionary from ``train_and_evaluate``
        loss_history: Per-epoch training loss, if the model records one

    Returns:
        Path to the run directory
    """
    run_dir = Path(run_dir)
    run_dir.mkdir(parents=True, exist_ok=True)

    with open(run_dir / "config.json", "w") as f:
        json.dump(run_config, f, indent=2, default=str)

    summary = {
        "model": run_results.get("model"),
        "train_size": run_results.get("train_size"),
        "test_size": run_results.get("test_size"),
        "train_time": run_results.get("train_time", 0.0),
        **run_results.get("metrics", {}),
    }
    if "final_loss" in run_results:
        summary["final_loss"] = run_results["final_loss"]
    with open(run_dir / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    if loss_history:
        history_df = pd.DataFrame({
            "epoch": range(1, len(loss_history) + 1),
            "loss": list(loss_history),
        })
        history_df.to_csv(run_dir / "history.csv", index=False)

    return run_dir


def display_run_summary(run_results: List[Dict[str, Any]], saved_runs: Optional[List[Path]] = None) -> str:
    """
    Print (and return) a summary of one or more runs, best accuracy first.

    Args:
        run_results: List of results dictionaries from ``train_and_evaluate``
        saved_runs: Optional paths of saved run directories
    """
    lines = ["=" * 60, "TRAINING RUNS COMPLETED", "=" * 60]
    ranked = sorted(run_results, key=lambda r: r["metrics"].get("Accuracy", 0.0), reverse=True)
    for i, result in enumerate(ranked, 1):
        lines.append(f"Run {i}: {result['model']}  (train={result['train_size']}, test={result['test_size']}, "
                     f"{result['train_time']:.2f}s)")
        lines.append("   " + " | ".join(f"{k}: {v:.4f}" for k, v in result["metrics"].items()))
    for run_dir in saved_runs or []:
        lines.append(f"   saved: {run_dir}")
    lines.append("=" * 60)
    text = "\n".join(lines)
    print(text)
    return text
