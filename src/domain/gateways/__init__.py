"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .payment_gateway import IPaymentProviderGateway, PaymentCredentials

__all__ = ["IPaymentProviderGateway", "PaymentCredentials"]
