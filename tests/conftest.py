"""Shared pytest fixtures for the juststrokes test suite.

Fixtures:
    sample_characters: Raw strokes for a small set of characters
    reference_entries: The sample characters encoded as database entries
    matcher: Matcher over reference_entries
    graphics_json_path: reference_entries written as graphics.json
    graphics_csv_path: reference_entries written as graphics.csv

Markers:
    integration: Mark test as integration test (skip with -m "not integration")
"""

import json
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from juststrokes.analysis.features import encode_strokes  # noqa: E402
from juststrokes.data.loaders import write_graphics_csv  # noqa: E402
from juststrokes.domain.character import CharacterEntry  # noqa: E402
from juststrokes.matching.matcher import Matcher  # noqa: E402

# Hand-traced strokes on a roughly 100x100 canvas, y pointing down.
# Shapes within one stroke count are kept clearly distinct.
SAMPLE_CHARACTERS = {
    # 1 stroke
    '一': [[(10, 50), (50, 52), (90, 50)]],
    '丨': [[(50, 10), (52, 50), (50, 90)]],
    '丿': [[(70, 10), (50, 50), (20, 90)]],
    # 2 strokes
    '十': [[(10, 50), (90, 50)], [(50, 10), (50, 90)]],
    '二': [[(25, 35), (75, 35)], [(10, 70), (90, 70)]],
    '人': [[(50, 10), (45, 50), (10, 90)], [(50, 40), (90, 90)]],
    '八': [[(40, 20), (15, 80)], [(60, 20), (85, 80)]],
    # 3 strokes
    '三': [[(30, 20), (70, 20)], [(35, 50), (65, 50)], [(10, 85), (90, 85)]],
    '川': [[(25, 15), (20, 85)], [(50, 20), (50, 80)], [(75, 10), (80, 90)]],
    '口': [[(20, 20), (20, 80)], [(20, 20), (80, 20), (80, 80)], [(20, 80), (80, 80)]],
}


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Sample Database Fixtures
# -----------------------------------------------------------------------------


def build_entries(characters=SAMPLE_CHARACTERS):
    """Encode raw sample strokes into database entries, in dict order."""
    return [
        CharacterEntry.from_features(char, encode_strokes(strokes))
        for char, strokes in characters.items()
    ]


@pytest.fixture
def sample_characters():
    """Return the raw sample strokes keyed by character.

    Returns:
        dict[str, list[list[tuple]]]: Character -> strokes in draw order.
    """
    return SAMPLE_CHARACTERS


@pytest.fixture
def reference_entries():
    """Return the sample characters encoded as CharacterEntry objects."""
    return build_entries()


@pytest.fixture
def matcher(reference_entries):
    """Return a Matcher with default options over the sample database."""
    return Matcher(reference_entries)


@pytest.fixture
def graphics_json_path(tmp_path, reference_entries):
    """Write the sample database in the JSON layout.

    Returns:
        pathlib.Path: Path to graphics.json inside tmp_path.
    """
    path = tmp_path / 'graphics.json'
    path.write_text(json.dumps([e.to_list() for e in reference_entries], ensure_ascii=False),
                    encoding='utf-8')
    return path


@pytest.fixture
def graphics_csv_path(tmp_path, reference_entries):
    """Write the sample database in the CSV layout.

    Returns:
        pathlib.Path: Path to graphics.csv inside tmp_path.
    """
    path = tmp_path / 'graphics.csv'
    write_graphics_csv(reference_entries, path)
    return path
