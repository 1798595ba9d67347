"""Payments context: payment processors."""
from storefront.payments.domain import PaymentProcessor
from storefront.payments.infrastructure import CreditCardProcessor, PayPalProcessor

__all__ = ["PaymentProcessor", "CreditCardProcessor", "PayPalProcessor"]
