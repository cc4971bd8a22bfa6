"""
wrike_search.wrike.models

Records returned by the Wrike v4 API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WrikeTask(BaseModel):
    """
    One task as returned by `GET /tasks?fields=[description]`.

    Frozen: task records are only ever displayed, never edited locally. Extra fields
    in the payload are kept so the record is passed through as received.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str
    title: str
    description: str = ""
    brief_description: str = Field(default="", alias="briefDescription")
    status: str = ""
    permalink: str = ""


class WrikeUser(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    # True for the contact that owns the bearer token.
    me: bool = False
