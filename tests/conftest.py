"""Shared fixtures for Groupie Tracker tests."""

import pytest

from groupie.catalog import build_catalog
from groupie.models import Artist, Relations
from groupie.web.server import WebServer


@pytest.fixture
def sample_artists():
    """Three artists as the API would return them; id 99 has no relation."""
    return [
        Artist(
            image="https://example.com/queen.jpeg",
            id=1,
            name="Queen",
            members=["Freddie Mercury", "Brian May"],
            creation_date=1970,
            first_album="14-12-1973",
            relations_url="https://example.com/api/relation/1",
        ),
        Artist(
            image="https://example.com/pinkfloyd.jpeg",
            id=2,
            name="Pink Floyd",
            members=["Roger Waters", "David Gilmour"],
            creation_date=1965,
            first_album="05-08-1967",
            relations_url="https://example.com/api/relation/2",
        ),
        Artist(id=99, name="Nobody Touring", members=["Solo"]),
    ]


@pytest.fixture
def sample_relations():
    return [
        Relations(id=1, dates_locations={"london-uk": ["01-01-2020", "02-01-2020"]}),
        Relations(id=2, dates_locations={"north_carolina-usa": ["03-03-2019"]}),
    ]


@pytest.fixture
def catalog(sample_artists, sample_relations):
    return build_catalog(sample_artists, sample_relations)


@pytest.fixture
def static_dir(tmp_path):
    """Throwaway static root with a stylesheet and one asset."""
    root = tmp_path / "static"
    (root / "css").mkdir(parents=True)
    (root / "assets").mkdir()
    (root / "css" / "style.css").write_text("body { color: red; }")
    (root / "assets" / "logo.svg").write_text("<svg></svg>")
    (tmp_path / "secret.txt").write_text("do not serve")
    return root


@pytest.fixture
def web_server(catalog, static_dir):
    """WebServer using the packaged templates and a temporary static root."""
    return WebServer(catalog=catalog, static_dir=static_dir)


@pytest.fixture
async def client(aiohttp_client, web_server):
    """aiohttp test client wired to the full site."""
    return await aiohttp_client(web_server.app)


@pytest.fixture(autouse=True, scope="session")
def quiet_booth():
    """Keep booth events out of captured test output."""
    from groupie.booth import booth

    booth.configure(console=False)
