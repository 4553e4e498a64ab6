"""Payment intents for pending orders.

The storefront never talks to a real processor: a ``PaymentProvider`` hands
out an (id, secret) pair and nothing is written to the order. The caller
finishes the handshake by recording the id through the order status update.
Providers are looked up by name from the ``PAYMENT_PROVIDER`` setting, so a
real integration only needs a new entry in ``PROVIDERS``.
"""
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Protocol

from flask import current_app

from models.order import OrderStatus
from app.metrics import PAYMENT_INTENTS_CREATED
from app.services.errors import InvalidStateError
from app.services.order_service import get_order
from app.utils.money import to_cents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentIntent:
    payment_intent_id: str
    client_secret: str

    def to_dict(self):
        return {
            "payment_intent_id": self.payment_intent_id,
            "client_secret": self.client_secret,
        }


class PaymentProvider(Protocol):
    name: str

    def create_intent(self, *, order_id: int, amount_cents: int, currency: str) -> PaymentIntent:
        ...


class MockPaymentProvider:
    """Synthetic intents: millisecond timestamp plus random hex, no guarantees beyond that."""

    name = "mock"
    prefix = "pi_mock"

    def create_intent(self, *, order_id: int, amount_cents: int, currency: str) -> PaymentIntent:
        stamp = int(time.time() * 1000)
        logger.debug("mock intent for order %s: %s %s", order_id, amount_cents, currency)
        return PaymentIntent(
            payment_intent_id=f"{self.prefix}_{stamp}_{uuid.uuid4().hex[:12]}",
            client_secret=f"{self.prefix}_{stamp}_secret_{uuid.uuid4().hex[:12]}",
        )


PROVIDERS = {
    MockPaymentProvider.name: MockPaymentProvider,
}


def init_payments(app) -> None:
    name = (app.config.get("PAYMENT_PROVIDER") or "mock").lower()
    provider_cls = PROVIDERS.get(name)
    if provider_cls is None:
        raise RuntimeError(f"Unknown PAYMENT_PROVIDER {name!r}; expected one of {sorted(PROVIDERS)}")
    app.extensions["payment_provider"] = provider_cls()
    app.logger.info("Payment provider: %s", name)


def get_payment_provider() -> PaymentProvider:
    return current_app.extensions["payment_provider"]


def create_payment_intent(order_id: int, provider: PaymentProvider = None) -> PaymentIntent:
    order = get_order(order_id)
    if order.status != OrderStatus.PENDING.value:
        raise InvalidStateError(f"Cannot create payment intent for order with status: {order.status}")

    provider = provider or get_payment_provider()
    intent = provider.create_intent(
        order_id=order.id,
        amount_cents=to_cents(order.total_amount),
        currency=current_app.config.get("PAYMENT_CURRENCY", "usd"),
    )
    PAYMENT_INTENTS_CREATED.labels(getattr(provider, "name", type(provider).__name__)).inc()
    logger.info({
        "event": "payment_intent_created",
        "order_id": order.id,
        "payment_intent_id": intent.payment_intent_id,
        "client_secret": intent.client_secret,
    })
    return intent
