"""Loading and converting reference character databases.

Two on-disk layouts hold the same data, an ordered list of characters
with one 10-value feature vector per stroke:

JSON (graphics.json)::

    [["一", [[0, 128, 85, 128, 170, 128, 255, 128, 128, 180]]], ...]

CSV (graphics.csv), UTF-8, tab-delimited, one character per line::

    一<TAB>0,128,85,128,170,128,255,128,128,180<TAB>...

The CSV layout is smaller and faster to parse; json_to_csv() converts
between them. All loaders validate vector sizes so malformed data is
rejected here rather than inside the matcher.

Example usage::

    from juststrokes.data import load_database, json_to_csv

    json_to_csv('graphics.json', 'graphics.csv')
    entries = load_database('graphics.csv')
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..config import FEATURE_LENGTH
from ..domain.character import CharacterEntry
from ..errors import DatabaseFormatError

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_entries(entries: Iterable[CharacterEntry]) -> None:
    """Check that every feature vector holds exactly 10 values.

    Raises:
        DatabaseFormatError: Naming the first offending character.
    """
    for entry in entries:
        for i, vector in enumerate(entry.features):
            if len(vector) != FEATURE_LENGTH:
                raise DatabaseFormatError(
                    f"Character {entry.character!r} stroke {i}: expected "
                    f"{FEATURE_LENGTH} values, got {len(vector)}")


def load_graphics_json(path: PathLike) -> list[CharacterEntry]:
    """Load a database from the JSON layout.

    Top-level items that are not two-element lists are skipped.

    Args:
        path: Path to the JSON file.

    Returns:
        Entries in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        DatabaseFormatError: On invalid JSON, a non-string character, a
            non-numeric value or a vector that is not 10 values long.
    """
    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DatabaseFormatError(f"{path}: invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DatabaseFormatError(f"{path}: expected a top-level array")

    entries = []
    for item in data:
        if not isinstance(item, list) or len(item) != 2:
            continue
        character, strokes = item
        if not isinstance(character, str):
            raise DatabaseFormatError(f"{path}: invalid character format: {character!r}")
        if not isinstance(strokes, list):
            raise DatabaseFormatError(f"{path}: strokes of {character!r} are not a list")

        features = []
        for stroke in strokes:
            if not isinstance(stroke, list) or not all(_is_number(v) for v in stroke):
                raise DatabaseFormatError(
                    f"{path}: non-numeric stroke data for {character!r}")
            features.append(stroke)
        entries.append(CharacterEntry.from_features(character, features))

    validate_entries(entries)
    logger.info("Loaded %d characters from %s", len(entries), path)
    return entries


def load_graphics_csv(path: PathLike) -> list[CharacterEntry]:
    """Load a database from the tab-delimited CSV layout.

    Blank lines are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
        DatabaseFormatError: On a non-numeric value or a vector that is
            not 10 values long.
    """
    entries = []
    with open(path, encoding='utf-8') as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip('\r\n')
            if not line:
                continue
            character, *fields = line.split('\t')
            try:
                features = [[float(v) for v in field.split(',')] for field in fields]
            except ValueError as e:
                raise DatabaseFormatError(f"{path}:{line_no}: {e}") from e
            entries.append(CharacterEntry.from_features(character, features))

    validate_entries(entries)
    logger.info("Loaded %d characters from %s", len(entries), path)
    return entries


def load_database(path: PathLike) -> list[CharacterEntry]:
    """Load a database, choosing the layout from the file suffix."""
    if Path(path).suffix.lower() == '.csv':
        return load_graphics_csv(path)
    return load_graphics_json(path)


def _format_value(value: float) -> str:
    """Write integral values without a trailing '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def write_graphics_csv(entries: Iterable[CharacterEntry], path: PathLike) -> int:
    """Write entries in the CSV layout.

    Returns:
        Number of entries written.
    """
    count = 0
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for entry in entries:
            fields = [entry.character]
            fields.extend(','.join(_format_value(v) for v in vector) for vector in entry.features)
            f.write('\t'.join(fields))
            f.write('\n')
            count += 1
    logger.info("Wrote %d characters to %s", count, path)
    return count


def json_to_csv(json_path: PathLike, csv_path: PathLike) -> int:
    """Convert a JSON database to the CSV layout.

    Returns:
        Number of entries written.
    """
    return write_graphics_csv(load_graphics_json(json_path), csv_path)
