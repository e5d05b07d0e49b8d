"""In-memory configuration store."""

from schemas.led_configuration import LEDConfiguration

from .exceptions import DocumentNotFoundError


class MemoryStore:
    """Dict-backed store.

    Documents are copied on the way in and on the way out, so nothing a
    caller does to a loaded document reaches the stored one.
    """

    def __init__(self, documents: dict[str, LEDConfiguration] | None = None):
        self._documents: dict[str, LEDConfiguration] = {}
        for location, document in (documents or {}).items():
            self.save(document, location)

    def __contains__(self, location: str) -> bool:
        return location in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def locations(self) -> list[str]:
        return list(self._documents)

    def load(self, location: str) -> LEDConfiguration:
        try:
            document = self._documents[location]
        except KeyError:
            raise DocumentNotFoundError(f"Document not found: {location}") from None
        return document.model_copy(deep=True)

    def save(self, document: LEDConfiguration, location: str) -> None:
        self._documents[location] = document.model_copy(deep=True)
