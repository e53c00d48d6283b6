"""
Gateways Package - Infrastructure Layer

This package contains implementations of the payment provider gateways
defined in the domain layer.
"""

from .paypal_gateway import PayPalGateway, resolve_paypal_base_url
from .stripe_gateway import StripeGateway

__all__ = ["PayPalGateway", "StripeGateway", "resolve_paypal_base_url"]
