"""
Groupie Tracker Catalog

Joins the artist list with the relation index and holds the result
for the lifetime of the process. Built once at startup, read-only after.
"""

import logging
from typing import Iterable, Iterator

from groupie.booth import booth
from groupie.models import Artist, Relations
from groupie.services.api_client import FetchError, GroupieClient

logger = logging.getLogger(__name__)

# Not served by the API; always shown first
FEATURED_ARTIST = Artist(
    image="/static/assets/xo.svg",
    id=54,
    name="The Weeknd",
    members=["Abel Tesfaye"],
    creation_date=2009,
    first_album="House of baloons",
    relation=Relations(
        id=54,
        dates_locations={
            "new_york-usa": ["27-11-2016", "26-11-2016"],
            "toronto-canada": ["05-09-2016", "04-09-2016"],
            "oujda-morocco": ["02-12-2016", "01-12-2016"],
        },
    ),
)


class Catalog:
    """Immutable, ordered collection of merged artists."""

    def __init__(self, artists: Iterable[Artist] = ()):
        self._artists = tuple(artists)

    @property
    def artists(self) -> tuple[Artist, ...]:
        return self._artists

    def __iter__(self) -> Iterator[Artist]:
        return iter(self._artists)

    def __len__(self) -> int:
        return len(self._artists)

    def __repr__(self) -> str:
        return f"Catalog({len(self._artists)} artists)"


def merge_relations(artists: Iterable[Artist], relations: Iterable[Relations]) -> list[Artist]:
    """Attach each artist's relation record by ID.

    Artist order is preserved. Artists without a matching record get an
    empty Relations. On duplicate relation IDs the last record wins.
    """
    by_id = {relation.id: relation for relation in relations}

    merged = []
    for artist in artists:
        relation = by_id.get(artist.id, Relations())
        merged.append(artist.model_copy(update={"relation": relation}))
    return merged


def build_catalog(artists: Iterable[Artist], relations: Iterable[Relations]) -> Catalog:
    """Merge artists with relations and put the featured artist first."""
    merged = merge_relations(artists, relations)
    matched = sum(1 for artist in merged if artist.relation.dates_locations)
    booth.merged(len(merged), matched)
    return Catalog([FEATURED_ARTIST, *merged])


async def load_catalog(client: GroupieClient) -> Catalog:
    """Fetch both endpoints and build the catalog.

    Each fetch is best-effort: a failure is logged and that side is
    treated as empty, so the site still starts.
    """
    relations: list[Relations] = []
    artists: list[Artist] = []

    try:
        relations = await client.fetch_relations()
    except FetchError as e:
        logger.error(f"Error fetching relations: {e}")

    try:
        artists = await client.fetch_artists()
    except FetchError as e:
        logger.error(f"Error fetching artists: {e}")

    catalog = build_catalog(artists, relations)
    logger.info(f"Catalog ready: {len(catalog)} artists")
    return catalog
