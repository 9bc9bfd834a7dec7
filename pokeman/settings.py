"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides paths for data and config files plus analysis limits."""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pokeman import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    model_config = SettingsConfigDict(env_prefix="POKEMAN_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    RANK_COUNT: int = 5
    """Number of types listed in the team weakness and strength rankings."""

    SLOT_CANDIDATE_LIMIT: int = 10
    """Maximum candidate moves listed per unlocked moveset slot."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def project_root(self) -> Path:
        """Root directory of the project (alias for PROJECT_ROOT)."""
        return self.PROJECT_ROOT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def data_dir(self) -> Path:
        """Directory holding the YAML data set."""
        return self.PROJECT_ROOT / "data"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def data_config_path(self) -> Path:
        """Path to the data.yml file naming the data set files."""
        return self.configs_dir / "data.yml"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml dictConfig file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
