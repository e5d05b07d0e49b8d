"""JSON command surface for host applications.

Each command takes and returns plain JSON-compatible values, so a UI shell
can call it directly. Failures are reported in the result instead of being
raised.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from led_merger.codec import DecodeError, decode_configuration, decode_mappings, encode_configuration
from led_merger.merge import ConfigurationLoader, ConfigurationMerger, MergeError
from led_merger.stores import ConfigurationStore, FileSystemStore, StoreError

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of a command.

    Attributes:
        ok: Whether the command succeeded
        configuration: The resulting configuration in wire layout
        error: Error message when the command failed
    """

    ok: bool
    configuration: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def success(cls, configuration: dict[str, Any]) -> "CommandResult":
        return cls(ok=True, configuration=configuration)

    @classmethod
    def failure(cls, error: str) -> "CommandResult":
        return cls(ok=False, error=error)


def _describe(error: DecodeError | StoreError | MergeError) -> str:
    errors = getattr(error, "errors", None)
    if errors:
        return f"{error.message}: {'; '.join(errors)}"
    return error.message


def load_config(path: str, store: ConfigurationStore | None = None) -> CommandResult:
    """Load the configuration at ``path``."""
    store = store or FileSystemStore()
    try:
        document = ConfigurationLoader(store).load(path)
    except StoreError as e:
        logger.error(f"Error loading config: {e}")
        return CommandResult.failure(f"Failed to load configuration: {_describe(e)}")
    return CommandResult.success(encode_configuration(document))


def merge_configs(
    base_config: dict[str, Any],
    mappings: list[dict[str, Any]],
    store: ConfigurationStore | None = None,
) -> CommandResult:
    """Merge ``mappings`` into ``base_config``.

    Args:
        base_config: Base configuration in wire layout
        mappings: Merge mappings in wire layout
        store: Store used to load source files (default: file system)
    """
    store = store or FileSystemStore()
    try:
        base = decode_configuration(base_config)
        merged = ConfigurationMerger(store).merge(base, decode_mappings(mappings))
    except (DecodeError, StoreError, MergeError) as e:
        logger.error(f"Error merging configs: {e}")
        return CommandResult.failure(_describe(e))
    return CommandResult.success(encode_configuration(merged))


def timestamped_filename(base_name: str | None, now: datetime | None = None) -> str:
    """Build an output file name from a base file name and a timestamp.

    Example:
        timestamped_filename("keyboard.json", datetime(2026, 1, 15, 9, 30))
        # "keyboard_2026-01-15_09-30-00.json"
    """
    now = now or datetime.now(timezone.utc)
    stem = re.sub(r"\.json$", "", base_name or "", flags=re.IGNORECASE) or "config"
    return f"{stem}_{now.strftime('%Y-%m-%d_%H-%M-%S')}.json"
