from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ClassificationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    previous_tier: str
    total_value: Decimal = Field(default=Decimal("0"), ge=0)


class ChangeNotification(BaseModel):
    # Wire form: {"id"?, "owner", "old", "new"}, flat, no other fields
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: str | None = Field(default=None, alias="id")
    owner: str
    previous_tier: str = Field(alias="old")
    new_tier: str = Field(alias="new")

    def to_payload(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class LoyaltyOut(BaseModel):
    owner: str
    loyalty: str
