from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request

from loyalty.schemas.loyalty import LoyaltyOut
from loyalty.services.loyalty import get_loyalty
from loyalty.services.notifications import NotificationDispatcher

router = APIRouter(tags=["loyalty"])


def get_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.dispatcher


def caller_identity(request: Request) -> str | None:
    u = getattr(request.state, "user", None) or {}
    uid = u.get("id")
    return str(uid) if uid else None


@router.get("/", response_model=LoyaltyOut)
def loyalty_level(
    request: Request,
    owner: str = Query(...),
    loyalty: str = Query(..., description="Previously known loyalty level"),
    total: Decimal = Query(Decimal("0"), ge=0, description="Total portfolio value"),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
) -> LoyaltyOut:
    return get_loyalty(owner, loyalty, total, caller_identity(request), dispatcher)
