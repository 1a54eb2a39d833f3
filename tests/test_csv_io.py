import io
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from learnkit.core import MissingColumnError, PreconditionError
from learnkit.datasets import dataframe_to_dataset, load_csv_dataset, preview, read_csv


@pytest.fixture()
def iris_like_csv(tmp_path: Path) -> Path:
    path = tmp_path / "data.csv"
    path.write_text(
        "sepal, petal, species, label\n"
        "5.1, 1.4, setosa, 0\n"
        "\n"
        "6.3, 4.9, virginica, 1\n"
        "5.8, 4.0, versicolor, 1\n"
    )
    return path


def test_read_csv_strips_names_and_skips_blank_lines(iris_like_csv: Path):
    df = read_csv(iris_like_csv)
    assert list(df.columns) == ["sepal", "petal", "species", "label"]
    assert len(df) == 3
    assert df["sepal"].dtype.kind == "f"
    assert df["species"].tolist() == ["setosa", "virginica", "versicolor"]


def test_read_csv_empty_source():
    df = read_csv(io.StringIO(""))
    assert df.empty


def test_dataframe_to_dataset_selected_columns(iris_like_csv: Path):
    data = dataframe_to_dataset(read_csv(iris_like_csv), "label", ["petal", "sepal"])
    assert data.feature_names == ("petal", "sepal")
    assert np.allclose(data.features[0], [1.4, 5.1])
    assert np.array_equal(data.labels, [0.0, 1.0, 1.0])


def test_dataframe_to_dataset_defaults_to_all_other_columns():
    df = pd.DataFrame({"a": [1, 2], "b": [3, 4], "y": [0, 1]})
    data = dataframe_to_dataset(df, "y")
    assert data.feature_names == ("a", "b")
    assert data.feature_count == 2


def test_missing_column_is_a_labeled_error(iris_like_csv: Path):
    df = read_csv(iris_like_csv)
    with pytest.raises(MissingColumnError) as exc:
        dataframe_to_dataset(df, "label", ["sepal", "width"])
    assert exc.value.column == "width"
    assert "width" in str(exc.value)
    assert isinstance(exc.value, KeyError)
    assert isinstance(exc.value, PreconditionError)


def test_non_numeric_feature_column_raises(iris_like_csv: Path):
    with pytest.raises(ValueError):
        dataframe_to_dataset(read_csv(iris_like_csv), "label", ["species"])


def test_load_csv_dataset_uses_last_column_as_label():
    source = io.StringIO("x1,x2,y\n0,0,0\n1,1,1\n2,2,1\n")
    data = load_csv_dataset(source)
    assert data.feature_names == ("x1", "x2")
    assert len(data) == 3
    assert np.array_equal(data.labels, [0.0, 1.0, 1.0])


def test_load_csv_dataset_empty_source():
    assert len(load_csv_dataset(io.StringIO(""))) == 0


def test_preview_lists_header_and_rows(iris_like_csv: Path):
    text = preview(read_csv(iris_like_csv), count=2)
    lines = text.splitlines()
    assert lines[0] == "sepal | petal | species | label"
    assert len(lines) == 4
    assert "setosa" in lines[2]


def test_row_with_too_few_fields_is_rejected():
    source = io.StringIO("x1,x2,y\n0,0,0\n1,1\n2,2,1\n")
    with pytest.raises(PreconditionError) as exc:
        load_csv_dataset(source)
    assert "row 1" in str(exc.value)
    assert "'y'" in str(exc.value)


def test_row_with_too_many_fields_is_rejected():
    source = io.StringIO("x1,x2,y\n0,0,0\n1,1,1,9\n2,2,1\n")
    with pytest.raises(PreconditionError) as exc:
        read_csv(source)
    assert "Malformed CSV row" in str(exc.value)


def test_empty_feature_cell_is_rejected():
    df = read_csv(io.StringIO("x1,x2,y\n0,0,0\n1,,1\n"))
    with pytest.raises(PreconditionError) as exc:
        dataframe_to_dataset(df, "y")
    assert "'x2'" in str(exc.value)
