# app/dependencies.py
"""Centralized dependencies for FastAPI application."""

from fastapi import Depends

from .config import Settings, get_settings
from .services.payments import StripeCheckoutClient


def get_payment_client(settings: Settings = Depends(get_settings)) -> StripeCheckoutClient:
    """Stripe client dependency.

    Built per request from the current settings.
    Usage: client: StripeCheckoutClient = Depends(get_payment_client)
    """
    return StripeCheckoutClient(api_key=settings.stripe_secret_key)
