"""
JSON Schema контракт для входных матриц

Схема matrix_payload.json поставляется внутри пакета (contracts/schema/)
и проверяет структуру и типы; согласованность rows/cols с фактическими
размерами data проверяет MatrixPayload (pydantic).

Вызывается из MatrixPayload.from_json() до pydantic-валидации.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

MATRIX_PAYLOAD_SCHEMA = "matrix_payload"


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: Имя схемы без расширения

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Файл не является валидной JSON Schema (draft 2020-12)
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


@lru_cache(maxsize=None)
def _matrix_payload_validator() -> Draft202012Validator:
    return Draft202012Validator(SchemaLoader().load_schema(MATRIX_PAYLOAD_SCHEMA))


def validate_matrix_payload(data: Mapping[str, Any]) -> None:
    """
    Проверка данных против matrix_payload.json.

    При нескольких нарушениях поднимается наиболее релевантное
    (jsonschema best_match).

    Raises:
        jsonschema.ValidationError: Данные не соответствуют схеме
    """
    error = best_match(_matrix_payload_validator().iter_errors(data))
    if error is not None:
        raise error
