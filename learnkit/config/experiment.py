"""
YAML-backed experiment configuration.

One file describes a whole run: where the CSV lives, which columns to use,
how to split it, which classifier to train and with what hyperparameters.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .training import KNNConfig, NaiveBayesConfig, SequentialConfig, SplitConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default.yaml"


class ExperimentConfig:
    """Configuration loader for a train/evaluate experiment.

    Missing sections fall back to the dataclass defaults, so a minimal file
    only needs the ``data`` section.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration from a YAML file.

        Args:
            config_path: Path to the YAML file. If None, uses
                the ``default.yaml`` shipped with this package.
        """
        self.config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, "r") as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML configuration: {e}")
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid YAML configuration: top level must be a mapping, got {type(loaded).__name__}")
        return loaded

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = self._load_config()

    def _section(self, name: str) -> Dict[str, Any]:
        return self._config.get(name) or {}

    # === Environment ===
    @property
    def random_seed(self) -> Optional[int]:
        return self._section("environment").get("random_seed")

    @property
    def log_level(self) -> str:
        return self._section("environment").get("log_level", "INFO")

    @property
    def output_dir(self) -> Optional[str]:
        return self._section("environment").get("output_dir")

    # === Data ===
    @property
    def csv_path(self) -> Optional[str]:
        return self._section("data").get("csv_path")

    @property
    def label_column(self) -> Optional[str]:
        return self._section("data").get("label_column")

    @property
    def feature_columns(self) -> List[str]:
        return list(self._section("data").get("feature_columns") or [])

    # === Model ===
    @property
    def model(self) -> str:
        return self._section("model").get("name", "sequential")

    @property
    def sequential(self) -> SequentialConfig:
        section = dict(self._section("model").get("sequential") or {})
        if "hidden_sizes" in section:
            section["hidden_sizes"] = tuple(section["hidden_sizes"] or ())
        section.setdefault("seed", self.random_seed)
        return SequentialConfig(**section)

    @property
    def knn(self) -> KNNConfig:
        return KNNConfig(**(self._section("model").get("knn") or {}))

    @property
    def naive_bayes(self) -> NaiveBayesConfig:
        return NaiveBayesConfig()

    def model_config(self):
        """Config dataclass matching the selected ``model``."""
        return {
            "sequential": self.sequential,
            "knn": self.knn,
            "naive_bayes": self.naive_bayes,
        }.get(self.model.lower())

    # === Split ===
    @property
    def split(self) -> SplitConfig:
        section = dict(self._section("split"))
        section.setdefault("seed", self.random_seed)
        return SplitConfig(**section)


def get_config(config_path: Optional[Union[str, Path]] = None) -> ExperimentConfig:
    """Load an experiment configuration (the default file when no path is given)."""
    return ExperimentConfig(config_path)
