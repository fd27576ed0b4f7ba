# services/checkout.py
"""Checkout logic independent of the HTTP layer."""

import json
import logging
from typing import Any, Dict, List, Protocol, Union

from ..config import Settings
from ..schemas.checkout import LineItem

logger = logging.getLogger(__name__)

INVALID_ITEMS_MESSAGE = "Invalid payload: items must be an array"


class InvalidPayloadError(ValueError):
    """Raised when the request body has no ``items`` array."""

    def __init__(self, message: str = INVALID_ITEMS_MESSAGE):
        super().__init__(message)
        self.message = message


class PaymentClient(Protocol):
    def create_session(self, params: Dict[str, Any]) -> Any:
        ...


def parse_items(body: Union[bytes, str, None]) -> list:
    """Parse the request body and return its ``items`` list.

    An empty body counts as ``{}``. Malformed JSON raises
    ``json.JSONDecodeError`` unchanged and a literal ``null`` body raises
    ``TypeError``; both are server errors, not shape errors.
    """
    payload = json.loads(body or "{}")
    if payload is None:
        raise TypeError("Cannot read items from a null request body")
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise InvalidPayloadError()
    return items


def build_line_items(items: list) -> List[LineItem]:
    # quantity uses Python truthiness: 0, None, "", [] and {} all become 1
    return [
        LineItem(
            currency="usd",
            product_name=item.get("name"),
            unit_amount_cents=item.get("price"),
            quantity=item.get("quantity") or 1,
        )
        for item in items
    ]


def build_session_params(line_items: List[LineItem], settings: Settings) -> Dict[str, Any]:
    return {
        "payment_method_types": ["card"],
        "line_items": [line_item.to_stripe() for line_item in line_items],
        "mode": "payment",
        "success_url": settings.success_url,
        "cancel_url": settings.cancel_url,
    }


def create_checkout_session(items: list, client: PaymentClient, settings: Settings):
    """Create a hosted checkout session for ``items`` and return it."""
    line_items = build_line_items(items)
    params = build_session_params(line_items, settings)
    session = client.create_session(params)
    logger.info(f"Created checkout session for {len(line_items)} items")
    return session
