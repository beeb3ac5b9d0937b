from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Tier(str, Enum):
    # declaration order is the tier order
    BASIC = "Basic"
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"

    @property
    def rank(self) -> int:
        return list(Tier).index(self)


@dataclass(frozen=True)
class TierRules:
    # Thresholds on portfolio total value; strictly greater than moves up
    bronze_above: Decimal = Decimal("10000.00")
    silver_above: Decimal = Decimal("50000.00")
    gold_above: Decimal = Decimal("100000.00")
    platinum_above: Decimal = Decimal("1000000.00")


RULES = TierRules()


def _to_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def tier_from_total(total_value: Decimal | int | float) -> Tier:
    total = _to_decimal(total_value)
    if total > RULES.platinum_above:
        return Tier.PLATINUM
    if total > RULES.gold_above:
        return Tier.GOLD
    if total > RULES.silver_above:
        return Tier.SILVER
    if total > RULES.bronze_above:
        return Tier.BRONZE
    return Tier.BASIC
