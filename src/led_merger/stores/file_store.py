"""File system configuration store."""

import logging
from pathlib import Path

from led_merger.codec import DecodeError, decode_configuration_json, encode_configuration_json
from schemas.led_configuration import LEDConfiguration

from .exceptions import DocumentNotFoundError, InvalidDocumentError, StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Store that keeps each configuration in its own JSON file.

    Example:
        store = FileSystemStore(Path("./configs"))
        config = store.load("base.json")
        store.save(config, "merged.json")
    """

    def __init__(
        self,
        base_dir: Path | None = None,
        indent: int = 2,
        encoding: str = "utf-8",
    ):
        """Initialize the store.

        Args:
            base_dir: Directory that relative locations resolve against.
                If None, relative locations resolve against the working directory.
            indent: JSON indentation for saved documents
            encoding: Text encoding for reading and writing
        """
        self.base_dir = base_dir
        self.indent = indent
        self.encoding = encoding

    def resolve(self, location: str) -> Path:
        path = Path(location)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def load(self, location: str) -> LEDConfiguration:
        """Read and decode the configuration file at ``location``.

        Raises:
            DocumentNotFoundError: If the file does not exist
            StoreReadError: If the file cannot be read
            InvalidDocumentError: If the content is not a valid configuration
        """
        path = self.resolve(location)
        if not path.is_file():
            raise DocumentNotFoundError(f"Configuration file not found: {path}")

        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(f"Failed to read file {path}: {e}") from e

        try:
            document = decode_configuration_json(content)
        except DecodeError as e:
            raise InvalidDocumentError(
                f"Invalid configuration in {path}: {e.message}", errors=e.errors
            ) from e

        logger.debug(f"Loaded {path} ({len(document.pages)} pages)")
        return document

    def save(self, document: LEDConfiguration, location: str) -> None:
        """Write ``document`` as pretty-printed JSON to ``location``.

        Raises:
            StoreWriteError: If the file cannot be written
        """
        path = self.resolve(location)
        content = encode_configuration_json(document, indent=self.indent)

        try:
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            raise StoreWriteError(f"Failed to write file {path}: {e}") from e

        logger.info(f"Saved configuration to {path}")
