"""
Groupie Tracker Data Model

Artist and Relations records decoded from the remote API, and the
ErrorPage view model used by the shared error template.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
)


class ApiRecord(BaseModel):
    """
    Base for records decoded from the API.

    - Frozen: records are read-only once decoded
    - Unknown keys are ignored, missing or null keys take the field's zero value
    - Fields accept both their JSON alias and their Python name
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_is_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Relations(ApiRecord):
    """Concert dates keyed by location for one artist."""

    id: StrictInt = 0
    dates_locations: dict[StrictStr, list[StrictStr]] = Field(
        default_factory=dict,
        alias="datesLocations",
    )


class RelationsResponse(ApiRecord):
    """Body of the relation endpoint: {"index": [...]}."""

    index: list[Relations] = Field(default_factory=list)


class Artist(ApiRecord):
    """A band or solo artist with its tour dates attached after merge."""

    image: StrictStr = ""
    id: StrictInt = 0
    name: StrictStr = ""
    members: list[StrictStr] = Field(default_factory=list)
    creation_date: StrictInt = Field(default=0, alias="creationDate")
    first_album: StrictStr = Field(default="", alias="firstAlbum")
    relations_url: StrictStr = Field(default="", alias="relations")
    # Filled in by the catalog merge, never by the API
    relation: Relations = Field(default_factory=Relations)


@dataclass
class ErrorPage:
    """View model for one render of the error template."""

    code: int
    message: str
    is_405: bool = field(init=False)
    is_404: bool = field(init=False)
    is_500: bool = field(init=False)
    is_403: bool = field(init=False)

    def __post_init__(self) -> None:
        self.is_405 = self.code == 405
        self.is_404 = self.code == 404
        self.is_500 = self.code == 500
        self.is_403 = self.code == 403
