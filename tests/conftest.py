"""
Pytest configuration and fixtures.

Provides common test fixtures for all test modules.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from gradechart.catalog import SchemeCatalog
from gradechart.chart import MatplotlibBarChartRenderer
from gradechart.config import Settings
from gradechart.resolver import SchemeResolver


# ==============================================================================
# Directory Fixtures
# ==============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings with fixed values."""
    return Settings(
        coverage_threshold=95.0,
        figure_width=4.0,
        figure_height=3.0,
        figure_dpi=72,
        font_size=10.0,
        output_directory=temp_dir / "output",
        log_level="WARNING",
    )


# ==============================================================================
# Component Fixtures
# ==============================================================================


@pytest.fixture
def catalog() -> SchemeCatalog:
    """Create a scheme catalog."""
    return SchemeCatalog()


@pytest.fixture
def resolver(test_settings: Settings, catalog: SchemeCatalog) -> SchemeResolver:
    """Create a resolver using the test settings."""
    return SchemeResolver(test_settings, catalog)


@pytest.fixture
def renderer(test_settings: Settings) -> MatplotlibBarChartRenderer:
    """Create a matplotlib renderer using the test settings."""
    return MatplotlibBarChartRenderer(test_settings)


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


@pytest.fixture
def ubse_grades() -> list[str]:
    """Abbreviated UBSE grades covering every level."""
    return ["U", "B", "S", "S", "E"]


@pytest.fixture
def mixed_ubse_grades() -> list[str]:
    """UBSE grades in mixed casing and full-text forms."""
    return ["u", "e", "b", "satisfactory", "S", "s", "E"]


@pytest.fixture
def use_like_grades() -> list[str]:
    """Grades that fit both UBSE (with no Borderline) and USE."""
    return ["U", "S", "S", "S", "E", "E"]


@pytest.fixture
def cidk_responses() -> list[str]:
    """CIDK responses in abbreviated and full-text forms."""
    return ["C", "I", "Incorrect", "Correct", "correct", "DK", "dont know", "Don't Know"]


@pytest.fixture
def c_only_responses() -> list[str]:
    """Responses made only of "C", shared by CIDK and CNINC."""
    return ["C", "C", "C"]
