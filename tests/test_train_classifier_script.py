import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from scripts.train_classifier import main, parse_args


@pytest.fixture()
def blobs_csv(tmp_path: Path) -> Path:
    rng = np.random.default_rng(0)
    X = np.vstack([rng.normal(0, 0.5, size=(20, 2)), rng.normal(4, 0.5, size=(20, 2))])
    df = pd.DataFrame({"f1": X[:, 0], "f2": X[:, 1], "label": [0] * 20 + [1] * 20})
    path = tmp_path / "blobs.csv"
    df.to_csv(path, index=False)
    return path


def test_parse_args_defaults():
    args = parse_args([])
    assert args.csv is None and args.model is None and not args.save


@pytest.mark.parametrize("model", ["knn", "naive_bayes", "sequential"])
def test_main_trains_and_saves(blobs_csv: Path, tmp_path: Path, model: str, capsys):
    out_dir = tmp_path / "runs"
    code = main([
        "--csv", str(blobs_csv), "--model", model, "--epochs", "5", "--seed", "1",
        "--save", "--output-dir", str(out_dir), "--no-progress",
    ])
    assert code == 0
    run_dirs = list(out_dir.iterdir())
    assert len(run_dirs) == 1
    summary = json.loads((run_dirs[0] / "summary.json").read_text())
    assert summary["train_size"] == 32 and summary["test_size"] == 8
    assert 0.0 <= summary["Accuracy"] <= 1.0
    assert "TRAINING RUNS COMPLETED" in capsys.readouterr().out


def test_main_without_csv_fails_cleanly(capsys):
    assert main(["--model", "knn"]) == 2
