# tagger_backend/app/services/session/intents.py
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

# Purpose:
# UI events are classified into one of these intents before they reach the
# engine. The `kind` field is the discriminator on the wire.

class ToggleTag(BaseModel):
    kind: Literal["toggle_tag"] = "toggle_tag"
    name: str = Field(..., min_length=1)
    category: str
    filter: str
    path: str = ""

class UpdateSearch(BaseModel):
    kind: Literal["update_search"] = "update_search"
    term: str = ""

class CopyCategory(BaseModel):
    kind: Literal["copy_category"] = "copy_category"
    category: str

class SetLocale(BaseModel):
    kind: Literal["set_locale"] = "set_locale"
    locale: str = Field(..., pattern=r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")

Intent = Annotated[
    Union[ToggleTag, UpdateSearch, CopyCategory, SetLocale],
    Field(discriminator="kind"),
]
