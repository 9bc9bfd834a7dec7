"""Contains configurations for the test run."""

from pathlib import Path

import pytest

from pokeman.core import TypeChart
from pokeman.ingestion import parse_type_chart, read_yaml_file


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Returns the path to the project root."""
    return Path(__file__).parents[2]


@pytest.fixture(scope="session")
def gen5_chart(project_root: Path) -> TypeChart:
    """Returns the type chart shipped in data/type_chart.yml."""
    document = read_yaml_file(project_root / "data" / "type_chart.yml").unwrap()
    return parse_type_chart(document).unwrap()
