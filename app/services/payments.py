# services/payments.py
"""Thin wrapper around the Stripe SDK."""

import logging
from typing import Any, Dict, Optional

import stripe

logger = logging.getLogger(__name__)


class StripeCheckoutClient:
    """Creates hosted Checkout sessions with an explicit API key.

    The key is passed on every call instead of being assigned to the
    module-global ``stripe.api_key``, so concurrent invocations with
    different settings never share credentials.
    """

    def __init__(self, api_key: Optional[str]) -> None:
        self.api_key = api_key

    def create_session(self, params: Dict[str, Any]) -> stripe.checkout.Session:
        logger.debug(f"Creating Stripe checkout session with {len(params.get('line_items', []))} line items")
        return stripe.checkout.Session.create(api_key=self.api_key, **params)
