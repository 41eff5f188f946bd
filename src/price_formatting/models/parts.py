"""Structural result of formatting a price."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PriceParts(BaseModel):
    """A price split into independently styled display slots.

    Field aliases (``Pre``, ``First``, ...) are the names callers use in
    templates and in ``model_dump(by_alias=True)``.
    """

    model_config = ConfigDict(populate_by_name=True)

    pre: str = Field(default="", alias="Pre")
    post: str = Field(default="", alias="Post")
    first: str = Field(default="", alias="First")
    pips: str = Field(default="", alias="Pips")
    deci_pips: str = Field(default="", alias="DeciPips")

    @property
    def text(self) -> str:
        """All slots joined in display order."""
        return self.pre + self.first + self.pips + self.deci_pips + self.post

    @property
    def is_empty(self) -> bool:
        return not self.text
