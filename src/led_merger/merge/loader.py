"""Configuration loading."""

from led_merger.stores.store import ConfigurationStore
from schemas.led_configuration import LEDConfiguration


class ConfigurationLoader:
    """Loads configurations from a store.

    Errors from the store are raised unchanged.
    """

    def __init__(self, store: ConfigurationStore):
        self.store = store

    def load(self, location: str) -> LEDConfiguration:
        return self.store.load(location)


def load_configuration(store: ConfigurationStore, location: str) -> LEDConfiguration:
    return ConfigurationLoader(store).load(location)
