"""
Number Snapshot Contract

Валидация JSON снапшота числа по contracts/schema/number_snapshot.json
(jsonschema, Draft 2020-12). Схема загружается и проверяется один раз при импорте.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# Корень проекта: 4 уровня вверх от этого файла
SCHEMA_DIR: Final[Path] = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


_NUMBER_SNAPSHOT_VALIDATOR: Final = Draft202012Validator(load_schema("number_snapshot"))


def validate_number_snapshot(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме number_snapshot
    """
    _NUMBER_SNAPSHOT_VALIDATOR.validate(data)
