"""Configuration store interface."""

from typing import Protocol, runtime_checkable

from schemas.led_configuration import LEDConfiguration


@runtime_checkable
class ConfigurationStore(Protocol):
    """Loads and saves configuration documents by location.

    ``location`` is opaque to callers; only the store gives it meaning
    (a file path, a URL path, a dictionary key).

    Implementations raise `StoreError` subclasses on failure.
    """

    def load(self, location: str) -> LEDConfiguration:
        """Load the document stored at ``location``."""
        ...

    def save(self, document: LEDConfiguration, location: str) -> None:
        """Store ``document`` at ``location``, replacing any existing one."""
        ...
