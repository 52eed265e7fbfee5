"""Unit tests for juststrokes.data.loaders.

Tests:
    - load_graphics_json: JSON layout, validation
    - load_graphics_csv: tab/comma layout, validation
    - load_database: layout chosen by suffix
    - write_graphics_csv / json_to_csv: conversion
"""

import json

import pytest

from juststrokes.data.loaders import (
    json_to_csv,
    load_database,
    load_graphics_csv,
    load_graphics_json,
    validate_entries,
    write_graphics_csv,
)
from juststrokes.domain.character import CharacterEntry
from juststrokes.errors import DatabaseFormatError

VECTOR = [0, 128, 85, 128, 170, 128, 255, 128, 128, 180]


def _write_json(tmp_path, data, name='graphics.json'):
    path = tmp_path / name
    path.write_text(json.dumps(data, ensure_ascii=False), encoding='utf-8')
    return path


class TestLoadGraphicsJson:
    """Tests for load_graphics_json."""

    def test_loads_in_order(self, graphics_json_path, reference_entries):
        assert load_graphics_json(graphics_json_path) == reference_entries

    def test_values_become_floats(self, tmp_path):
        path = _write_json(tmp_path, [['一', [VECTOR]]])
        entry = load_graphics_json(path)[0]
        assert entry.character == '一'
        assert entry.features == (tuple(float(v) for v in VECTOR),)

    def test_skips_non_pair_items(self, tmp_path):
        path = _write_json(tmp_path, [['一', [VECTOR]], 'junk', ['x'], ['二', [VECTOR, VECTOR]]])
        assert [e.character for e in load_graphics_json(path)] == ['一', '二']

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'graphics.json'
        path.write_text('[["一", [', encoding='utf-8')
        with pytest.raises(DatabaseFormatError, match='invalid JSON'):
            load_graphics_json(path)

    def test_top_level_must_be_array(self, tmp_path):
        with pytest.raises(DatabaseFormatError):
            load_graphics_json(_write_json(tmp_path, {'一': [VECTOR]}))

    def test_character_must_be_string(self, tmp_path):
        with pytest.raises(DatabaseFormatError, match='invalid character'):
            load_graphics_json(_write_json(tmp_path, [[1, [VECTOR]]]))

    def test_non_numeric_value(self, tmp_path):
        bad = VECTOR[:9] + ['x']
        with pytest.raises(DatabaseFormatError, match='non-numeric'):
            load_graphics_json(_write_json(tmp_path, [['一', [bad]]]))

    def test_boolean_is_not_numeric(self, tmp_path):
        bad = VECTOR[:9] + [True]
        with pytest.raises(DatabaseFormatError):
            load_graphics_json(_write_json(tmp_path, [['一', [bad]]]))

    def test_wrong_vector_length(self, tmp_path):
        with pytest.raises(DatabaseFormatError, match="'一' stroke 0"):
            load_graphics_json(_write_json(tmp_path, [['一', [VECTOR[:9]]]]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graphics_json(tmp_path / 'missing.json')


class TestLoadGraphicsCsv:
    """Tests for load_graphics_csv."""

    def test_loads_in_order(self, graphics_csv_path, reference_entries):
        assert load_graphics_csv(graphics_csv_path) == reference_entries

    def test_parses_fields(self, tmp_path):
        path = tmp_path / 'graphics.csv'
        line = '\t'.join(['十', ','.join(map(str, VECTOR)), ','.join(map(str, VECTOR))])
        path.write_text(line + '\n', encoding='utf-8')
        entries = load_graphics_csv(path)
        assert len(entries) == 1
        assert entries[0].character == '十'
        assert entries[0].stroke_count == 2

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / 'graphics.csv'
        row = '一\t' + ','.join(map(str, VECTOR))
        path.write_text(f'{row}\n\n{row}\r\n\n', encoding='utf-8')
        assert len(load_graphics_csv(path)) == 2

    def test_non_numeric_reports_line(self, tmp_path):
        path = tmp_path / 'graphics.csv'
        good = '一\t' + ','.join(map(str, VECTOR))
        bad = '二\t' + ','.join(map(str, VECTOR[:9] + ['abc']))
        path.write_text(f'{good}\n{bad}\n', encoding='utf-8')
        with pytest.raises(DatabaseFormatError, match=r'graphics\.csv:2:'):
            load_graphics_csv(path)

    def test_wrong_vector_length(self, tmp_path):
        path = tmp_path / 'graphics.csv'
        path.write_text('一\t1,2,3\n', encoding='utf-8')
        with pytest.raises(DatabaseFormatError, match='expected 10 values, got 3'):
            load_graphics_csv(path)


class TestLoadDatabase:
    """Tests for load_database."""

    def test_csv_suffix(self, graphics_csv_path, reference_entries):
        assert load_database(graphics_csv_path) == reference_entries

    def test_upper_case_suffix(self, tmp_path, reference_entries):
        path = tmp_path / 'GRAPHICS.CSV'
        write_graphics_csv(reference_entries, path)
        assert load_database(path) == reference_entries

    def test_other_suffix_is_json(self, graphics_json_path, reference_entries):
        assert load_database(str(graphics_json_path)) == reference_entries


class TestConversion:
    """Tests for write_graphics_csv and json_to_csv."""

    def test_integral_values_without_decimal(self, tmp_path):
        path = tmp_path / 'out.csv'
        entries = [CharacterEntry.from_features('一', [VECTOR])]
        assert write_graphics_csv(entries, path) == 1
        assert path.read_text(encoding='utf-8') == '一\t' + ','.join(map(str, VECTOR)) + '\n'

    def test_fractional_values_kept(self, tmp_path):
        path = tmp_path / 'out.csv'
        vector = [0.5] + VECTOR[1:]
        write_graphics_csv([CharacterEntry.from_features('一', [vector])], path)
        assert path.read_text(encoding='utf-8').startswith('一\t0.5,128,')

    def test_json_to_csv(self, graphics_json_path, tmp_path, reference_entries):
        csv_path = tmp_path / 'converted.csv'
        assert json_to_csv(graphics_json_path, csv_path) == len(reference_entries)
        assert load_graphics_csv(csv_path) == load_graphics_json(graphics_json_path)

    def test_json_to_csv_rejects_bad_input(self, tmp_path):
        json_path = _write_json(tmp_path, [['一', [VECTOR[:5]]]])
        with pytest.raises(DatabaseFormatError):
            json_to_csv(json_path, tmp_path / 'out.csv')
        assert not (tmp_path / 'out.csv').exists()


def test_validate_entries_accepts_good_data(reference_entries):
    validate_entries(reference_entries)
