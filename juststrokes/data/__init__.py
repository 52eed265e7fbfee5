"""Reference database loading and conversion.

Functions:
    load_graphics_json: Load the JSON layout.
    load_graphics_csv: Load the tab-delimited CSV layout.
    load_database: Load either, by file suffix.
    write_graphics_csv, json_to_csv: Write/convert to CSV.
    validate_entries: Reject vectors that are not 10 values long.
"""

from .loaders import (
    json_to_csv,
    load_database,
    load_graphics_csv,
    load_graphics_json,
    validate_entries,
    write_graphics_csv,
)

__all__ = [
    'load_graphics_json', 'load_graphics_csv', 'load_database',
    'write_graphics_csv', 'json_to_csv', 'validate_entries',
]
