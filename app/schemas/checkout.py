from pydantic import BaseModel
from typing import Any, Dict


class LineItem(BaseModel):
    """One Stripe line item built from an inbound purchase item.

    ``product_name`` and ``unit_amount_cents`` are forwarded as received;
    Stripe decides whether they are acceptable.
    """
    currency: str = "usd"
    product_name: Any = None
    unit_amount_cents: Any = None
    quantity: Any = 1

    def to_stripe(self) -> Dict[str, Any]:
        return {
            "price_data": {
                "currency": self.currency,
                "product_data": {
                    "name": self.product_name,
                },
                "unit_amount": self.unit_amount_cents,
            },
            "quantity": self.quantity,
        }


class CheckoutSessionResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    error: str
