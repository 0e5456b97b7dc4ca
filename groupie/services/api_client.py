"""
Groupie Tracker API Client

Async wrapper around the Groupie Trackers JSON API.
Fetches the artist list and the relation (tour date) index.
"""

import logging
from typing import Any

import aiohttp
from pydantic import TypeAdapter, ValidationError

from groupie.booth import booth
from groupie.models import Artist, Relations, RelationsResponse

logger = logging.getLogger(__name__)

ARTIST_LIST = TypeAdapter(list[Artist])


class FetchError(RuntimeError):
    """Raised when an endpoint cannot be fetched or decoded."""


class GroupieClient:
    """Client for the artists and relation endpoints."""

    def __init__(self, artists_url: str, relations_url: str):
        """
        Initialize the API client.

        Args:
            artists_url: Endpoint returning a JSON list of artists
            relations_url: Endpoint returning {"index": [...]} of relation records
        """
        self.artists_url = artists_url
        self.relations_url = relations_url
        self._session: aiohttp.ClientSession | None = None

    async def start(self) -> None:
        """Initialize the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            logger.info(f"API client started (artists: {self.artists_url})")

    async def stop(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
            logger.info("API client stopped")

    async def fetch_json(self, url: str) -> Any:
        """
        GET a URL and decode the body as JSON.

        Returns:
            The decoded JSON document

        Raises:
            FetchError: On connection failure, non-200 status or undecodable body
        """
        if self._session is None:
            await self.start()

        booth.fetch_request(url)
        logger.debug(f"Fetching {url}")

        try:
            async with self._session.get(url) as response:
                if response.status != 200:
                    booth.fetch_error(f"{url} returned {response.status}")
                    raise FetchError(f"received non-200 response code: {response.status}")

                # The API does not always label its bodies as JSON
                return await response.json(content_type=None)

        except aiohttp.ClientError as e:
            booth.fetch_error(str(e))
            raise FetchError(f"error making GET request: {e}") from e
        except ValueError as e:
            booth.fetch_error(f"{url}: invalid JSON")
            raise FetchError(f"error decoding response from {url}: {e}") from e

    async def fetch_artists(self) -> list[Artist]:
        """Fetch and decode the artist list."""
        data = await self.fetch_json(self.artists_url)
        try:
            artists = ARTIST_LIST.validate_python(data)
        except ValidationError as e:
            booth.fetch_error(f"{self.artists_url}: {e.error_count()} invalid fields")
            raise FetchError(f"error decoding artists: {e}") from e

        booth.fetch_done(self.artists_url, len(artists))
        return artists

    async def fetch_relations(self) -> list[Relations]:
        """Fetch and decode the relation index."""
        data = await self.fetch_json(self.relations_url)
        try:
            relations = RelationsResponse.model_validate(data).index
        except ValidationError as e:
            booth.fetch_error(f"{self.relations_url}: {e.error_count()} invalid fields")
            raise FetchError(f"error decoding relations: {e}") from e

        booth.fetch_done(self.relations_url, len(relations))
        return relations
