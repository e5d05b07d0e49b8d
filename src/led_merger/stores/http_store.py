"""HTTP-backed configuration store.

Documents live under a base URL and are addressed by location relative to it.
``load`` issues a GET and ``save`` a PUT. When the server tags documents with
an ``ETag``, the store remembers it per location and sends it back as
``If-Match`` on the next save, so overwriting a document somebody else changed
in the meantime fails with :class:`WriteConflictError` instead of silently
discarding their edits.
"""

import logging

import httpx
from pydantic import BaseModel, Field

from led_merger.codec import DecodeError, decode_configuration_json, encode_configuration_json
from schemas.led_configuration import LEDConfiguration

from .exceptions import (
    DocumentNotFoundError,
    InvalidDocumentError,
    StoreAPIError,
    StoreConnectionError,
    WriteConflictError,
)

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class HttpStoreSettings(BaseModel):
    """Connection settings for :class:`HttpStore`.

    Attributes:
        base_url: URL that locations are resolved against
        timeout: Request timeout in seconds
        retries: Extra connection attempts made by the transport
        headers: Headers sent with every request, e.g. authorization
    """

    base_url: str
    timeout: float = 30.0
    retries: int = Field(default=2, ge=0)
    headers: dict[str, str] = Field(default_factory=dict)


class HttpStore:
    """Store that reads and writes configurations over HTTP.

    Example:
        with HttpStore({"base_url": "https://devices.example.com/configs/"}) as store:
            base = store.load("keyboard-42.json")
            store.save(base, "keyboard-42.json")
    """

    def __init__(
        self,
        settings: HttpStoreSettings | dict,
        transport: httpx.BaseTransport | None = None,
    ):
        if not isinstance(settings, HttpStoreSettings):
            settings = HttpStoreSettings.model_validate(settings)

        self.settings = settings
        self._transport = transport
        self._client: httpx.Client | None = None
        self._etags: dict[str, str] = {}

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout,
                headers=self.settings.headers,
                transport=self._transport or httpx.HTTPTransport(retries=self.settings.retries),
            )
        return self._client

    def etag(self, location: str) -> str | None:
        """Version tag last seen for ``location``, if the server sent one."""
        return self._etags.get(location)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _send(self, method: str, location: str, **kwargs) -> httpx.Response:
        try:
            return self.client.request(method, location, **kwargs)
        except httpx.TransportError as e:
            raise StoreConnectionError(
                f"Could not reach {self.settings.base_url}: {e}"
            ) from e

    def _remember_etag(self, location: str, response: httpx.Response) -> None:
        etag = response.headers.get("ETag")
        if etag:
            self._etags[location] = etag
        else:
            self._etags.pop(location, None)

    @staticmethod
    def _unexpected(response: httpx.Response, location: str) -> StoreAPIError:
        return StoreAPIError(
            f"{response.request.method} {location} returned {response.status_code}",
            status_code=response.status_code,
        )

    def load(self, location: str) -> LEDConfiguration:
        """Fetch and decode the configuration at ``location``.

        Raises:
            DocumentNotFoundError: If the server answers 404
            InvalidDocumentError: If the body is not a configuration document
            StoreAPIError: For any other unsuccessful status
            StoreConnectionError: If the server cannot be reached
        """
        response = self._send("GET", location, headers={"Accept": JSON_MEDIA_TYPE})

        if response.status_code == 404:
            raise DocumentNotFoundError(f"Document not found: {location}")
        if not response.is_success:
            raise self._unexpected(response, location)

        try:
            document = decode_configuration_json(response.content)
        except DecodeError as e:
            raise InvalidDocumentError(
                f"Invalid configuration at {location}: {e.message}",
                errors=e.errors,
            ) from e

        self._remember_etag(location, response)
        logger.debug(f"Fetched {location} ({len(document.pages)} pages)")
        return document

    def save(self, document: LEDConfiguration, location: str) -> None:
        """Encode ``document`` and PUT it to ``location``.

        Raises:
            WriteConflictError: If the server reports the stored document
                changed since it was loaded (409 or 412)
            StoreAPIError: For any other unsuccessful status
            StoreConnectionError: If the server cannot be reached
        """
        headers = {"Content-Type": JSON_MEDIA_TYPE}
        etag = self._etags.get(location)
        if etag:
            headers["If-Match"] = etag

        response = self._send(
            "PUT",
            location,
            content=encode_configuration_json(document).encode("utf-8"),
            headers=headers,
        )

        if response.status_code in (409, 412):
            raise WriteConflictError(
                f"Configuration at {location} changed since it was loaded",
                status_code=response.status_code,
            )
        if not response.is_success:
            raise self._unexpected(response, location)

        self._remember_etag(location, response)
        logger.info(f"Saved configuration to {location}")
