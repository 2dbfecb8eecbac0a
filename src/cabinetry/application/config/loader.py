"""Engine configuration loader.

Loads an ``EngineConfiguration`` from a JSON file or dictionary and turns
file system, JSON and validation failures into ``ConfigError`` with a
message naming the offending setting.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinetry.application.config.schema import EngineConfiguration


class ConfigError(Exception):
    """Exception raised when an engine configuration cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the configuration file (if applicable)
        details: Line/column for JSON errors, one entry per failed
            setting for validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _setting_path(loc: tuple[str | int, ...]) -> str:
    """Join a Pydantic location into a dotted setting name.

    Examples:
        >>> _setting_path(("construction", "door_gap"))
        'construction.door_gap'
        >>> _setting_path(("catalog", "link_id_columns", 0))
        'catalog.link_id_columns[0]'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _setting_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail.get("value") is not None and not isinstance(detail["value"], dict):
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> EngineConfiguration:
    """Validate an engine configuration held in a dictionary.

    Raises:
        ConfigError: With error_type "validation" if the data does not
            match the schema.
    """
    try:
        return EngineConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> EngineConfiguration:
    """Load and validate an engine configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    return load_config_from_dict(data, path=path)
