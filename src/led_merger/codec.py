"""Decoding and encoding of LED configuration documents and merge mappings."""

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.led_configuration import LEDConfiguration
from schemas.merge_mapping import MergeMapping


class DecodeError(Exception):
    """Raised when a document or mapping list does not match its schema."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.message = message
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


def _error_strings(exc: PydanticValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]


def decode_configuration(data: Any) -> LEDConfiguration:
    """Decode a parsed JSON value into an LEDConfiguration.

    Args:
        data: Parsed JSON (normally a dict)

    Returns:
        The validated configuration

    Raises:
        DecodeError: If required fields are missing or a numeric field
            cannot be coerced
    """
    try:
        return LEDConfiguration.model_validate(data, by_alias=True, by_name=False)
    except PydanticValidationError as e:
        raise DecodeError(
            "Configuration failed validation",
            errors=_error_strings(e),
        ) from e


def decode_configuration_json(text: str | bytes) -> LEDConfiguration:
    """Decode JSON text into an LEDConfiguration."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to parse JSON: {e}") from e
    return decode_configuration(data)


def encode_configuration(document: LEDConfiguration) -> dict[str, Any]:
    """Encode a configuration back to its wire layout.

    Only fields that were present when the document was decoded, or were
    assigned since, are emitted. Unknown keys carried on the models are kept.
    """
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)


def encode_configuration_json(document: LEDConfiguration, indent: int | None = 2) -> str:
    return json.dumps(encode_configuration(document), indent=indent, ensure_ascii=False)


def decode_mappings(data: Any) -> list[MergeMapping]:
    """Decode a list of merge mappings.

    Raises:
        DecodeError: If the value is not a list or any entry is malformed
    """
    if not isinstance(data, list):
        raise DecodeError(
            f"Merge mappings must be a list, got {type(data).__name__}"
        )

    mappings: list[MergeMapping] = []
    for i, item in enumerate(data):
        try:
            mappings.append(
                MergeMapping.model_validate(item, by_alias=True, by_name=False)
            )
        except PydanticValidationError as e:
            raise DecodeError(
                f"Mapping at index {i} failed validation",
                errors=_error_strings(e),
            ) from e

    return mappings


def encode_mappings(mappings: list[MergeMapping]) -> list[dict[str, Any]]:
    return [
        mapping.model_dump(mode="json", by_alias=True, exclude_none=True)
        for mapping in mappings
    ]
