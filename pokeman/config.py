"""ABOUTME: Configuration loader for the data set files.
ABOUTME: Handles loading and parsing of data.yml configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from pokeman.settings import settings


class DataSourcesConfig(BaseModel):
    """Locations of the YAML data set files, relative to the project root."""

    type_chart: Path
    species: Path
    moves: Path
    team: Path

    def resolve(self, root: Path) -> "DataSourcesConfig":
        """Return a copy with every relative path anchored at `root`.

        Args:
            root: Directory relative paths are resolved against.

        Returns:
            Config whose paths are absolute (or already were).
        """
        return DataSourcesConfig(
            type_chart=root / self.type_chart,
            species=root / self.species,
            moves=root / self.moves,
            team=root / self.team,
        )


def load_data_config(config_path: Path | None = None) -> DataSourcesConfig:
    """Load data source configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.data_config_path.

    Returns:
        Parsed DataSourcesConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    if config_path is None:
        config_path = settings.data_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Data config not found: {config_path}")

    with config_path.open() as f:
        raw_config = yaml.safe_load(f)

    return DataSourcesConfig.model_validate(raw_config)
