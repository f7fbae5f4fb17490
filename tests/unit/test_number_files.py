"""
Тесты для Number Files — хранение чисел в файлах

Coverage:
- Decimal file: запись/чтение, fallback на пустое число с WARNING
- Snapshot file: JSON round trip с валидацией контракта
- PersistenceError при ошибках ввода-вывода
"""

import json
import logging

import pytest
from jsonschema import ValidationError

from src.core.errors import PersistenceError
from src.number import NumberList
from src.storage import load_number, load_snapshot, save_number, save_snapshot


class TestDecimalFile:
    """Тесты save_number / load_number."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "number.txt"
        save_number(path, NumberList(10 ** 30 + 13, 3))
        assert path.read_text(encoding="utf-8") == str(10 ** 30 + 13)

        loaded = load_number(path)
        assert loaded.value == 10 ** 30 + 13
        assert loaded.base == 2

    def test_load_with_base(self, tmp_path):
        path = tmp_path / "number.txt"
        path.write_text("13\n", encoding="utf-8")
        assert load_number(path, base=3).to_base_string() == "111"

    def test_round_trip_beyond_int_str_digit_limit(self, tmp_path):
        path = tmp_path / "big.txt"
        path.write_text("1" + "0" * 5000 + "\n", encoding="utf-8")

        loaded = load_number(path, base=10)
        assert loaded.value == 10 ** 5000
        assert loaded.size == 5001

        save_number(path, loaded)
        assert path.read_text(encoding="utf-8") == "1" + "0" * 5000

    def test_save_zero(self, tmp_path):
        path = tmp_path / "zero.txt"
        save_number(path, NumberList())
        assert path.read_text(encoding="utf-8") == "0"

    def test_missing_file_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            number = load_number(tmp_path / "missing.txt")
        assert number.is_empty
        assert "not found" in caplog.text

    def test_empty_file_is_empty(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("  \n", encoding="utf-8")
        assert load_number(path).value == 0

    def test_invalid_file_is_empty(self, tmp_path, caplog):
        path = tmp_path / "bad.txt"
        path.write_text("-42", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            number = load_number(path)
        assert number.value == 0
        assert "Invalid number" in caplog.text

    def test_directory_is_treated_as_missing(self, tmp_path):
        assert load_number(tmp_path).is_empty

    def test_save_failure(self, tmp_path):
        with pytest.raises(PersistenceError):
            save_number(tmp_path / "no_such_dir" / "number.txt", NumberList(1))


class TestSnapshotFile:
    """Тесты save_snapshot / load_snapshot."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "number.json"
        number = NumberList(13)
        number.insert(0, 0)
        save_snapshot(path, number)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {
            "schema_version": "1",
            "decimal_value": "13",
            "base": 2,
            "digits": [0, 1, 1, 0, 1],
        }

        restored = load_snapshot(path)
        assert restored == number
        assert restored.to_list() == [0, 1, 1, 0, 1]

    def test_load_missing(self, tmp_path):
        with pytest.raises(PersistenceError):
            load_snapshot(tmp_path / "missing.json")

    def test_load_not_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PersistenceError):
            load_snapshot(path)

    def test_load_contract_violation(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"decimal_value": "13"}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_snapshot(path)

    def test_save_failure(self, tmp_path):
        with pytest.raises(PersistenceError):
            save_snapshot(tmp_path / "no_such_dir" / "n.json", NumberList(1))
