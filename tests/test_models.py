"""Tests for JSON decoding and the error view model."""

import pytest
from pydantic import ValidationError

from groupie.models import Artist, ErrorPage, Relations, RelationsResponse


def test_artist_validate_maps_api_fields():
    artist = Artist.model_validate({
        "id": 1,
        "image": "https://example.com/queen.jpeg",
        "name": "Queen",
        "members": ["Freddie Mercury", "Brian May"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": "https://example.com/api/locations/1",
        "relations": "https://example.com/api/relation/1",
    })

    assert artist.id == 1
    assert artist.name == "Queen"
    assert artist.members == ["Freddie Mercury", "Brian May"]
    assert artist.creation_date == 1970
    assert artist.first_album == "14-12-1973"
    assert artist.relations_url == "https://example.com/api/relation/1"
    assert artist.relation == Relations()


def test_artist_built_by_field_name():
    artist = Artist(id=3, creation_date=1999, first_album="Debut")
    assert artist.creation_date == 1999
    assert artist.first_album == "Debut"


def test_artist_missing_fields_are_zero():
    artist = Artist.model_validate({"id": 7})
    assert artist.name == ""
    assert artist.members == []
    assert artist.creation_date == 0
    assert artist.relation.dates_locations == {}


def test_null_fields_decode_to_zero_values():
    artist = Artist.model_validate({"id": None, "name": None, "members": None, "creationDate": None})
    assert artist.id == 0
    assert artist.name == ""
    assert artist.members == []
    assert artist.creation_date == 0


@pytest.mark.parametrize("data", [
    {"id": "1"},
    {"id": True},
    {"id": 1.5},
    {"id": 1, "members": "Freddie"},
    {"id": 1, "members": [1, 2]},
    {"id": 1, "name": 42},
    ["not", "an", "object"],
])
def test_artist_rejects_wrong_types(data):
    with pytest.raises(ValidationError):
        Artist.model_validate(data)


def test_relations_validate():
    relation = Relations.model_validate({
        "id": 3,
        "datesLocations": {"osaka-japan": ["28-01-2020"], "london-uk": []},
    })
    assert relation.id == 3
    assert relation.dates_locations == {"osaka-japan": ["28-01-2020"], "london-uk": []}


def test_relations_null_locations():
    relation = Relations.model_validate({"id": 3, "datesLocations": None})
    assert relation.dates_locations == {}


def test_relations_rejects_non_string_dates():
    with pytest.raises(ValidationError):
        Relations.model_validate({"id": 3, "datesLocations": {"london-uk": [20200101]}})


def test_relations_response_missing_or_null_index():
    assert RelationsResponse.model_validate({}).index == []
    assert RelationsResponse.model_validate({"index": None}).index == []


def test_artist_is_frozen():
    artist = Artist(id=1, name="Queen")
    with pytest.raises(ValidationError):
        artist.name = "King"


@pytest.mark.parametrize("code, flag", [
    (403, "is_403"),
    (404, "is_404"),
    (405, "is_405"),
    (500, "is_500"),
])
def test_error_page_sets_exactly_one_flag(code, flag):
    page = ErrorPage(code=code, message="oops")
    flags = {name: getattr(page, name) for name in ("is_403", "is_404", "is_405", "is_500")}
    assert flags.pop(flag) is True
    assert not any(flags.values())


def test_error_page_unknown_code_sets_no_flag():
    page = ErrorPage(code=418, message="teapot")
    assert not (page.is_403 or page.is_404 or page.is_405 or page.is_500)
