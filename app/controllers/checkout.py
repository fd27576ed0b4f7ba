# controllers/checkout.py
"""Checkout session endpoint."""

import logging

import stripe
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..dependencies import get_payment_client
from ..schemas import checkout as schemas
from ..services import checkout as service
from ..services.checkout import InvalidPayloadError, PaymentClient

logger = logging.getLogger(__name__)

router = APIRouter()


def _error_message(exc: Exception) -> str:
    if isinstance(exc, stripe.StripeError):
        return exc.user_message or str(exc)
    return str(exc)


@router.post(
    "/checkout",
    response_model=schemas.CheckoutSessionResponse,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
    summary="Create a Stripe Checkout session",
)
async def create_checkout(
    request: Request,
    client: PaymentClient = Depends(get_payment_client),
    settings: Settings = Depends(get_settings),
):
    """Turn a list of items into a hosted checkout session and return its URL.

    Expects ``{"items": [{"name": str, "price": int, "quantity": int}]}``
    with prices in cents. Invalid shape gives 400; any other failure,
    malformed JSON included, gives 500 with the underlying message.
    """
    try:
        body = await request.body()
        try:
            items = service.parse_items(body)
        except InvalidPayloadError as e:
            return JSONResponse(status_code=400, content={"error": e.message})

        session = await run_in_threadpool(service.create_checkout_session, items, client, settings)
        return {"url": session.url}
    except Exception as e:
        logger.error(f"Stripe checkout error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": _error_message(e)})
