import re

import pytest

from app.services.payments import MockPaymentProvider, PaymentIntent, create_payment_intent
from conftest import place_order


def _intent(client, order_id):
    return client.post(f'/api/v1/orders/{order_id}/payment-intent')


def test_mock_intent_shape(client, catalog):
    widget = catalog()
    order_id = place_order(client, [(widget.id, 1)]).get_json()['data']['id']
    resp = _intent(client, order_id)
    assert resp.status_code == 200
    data = resp.get_json()['data']
    assert re.fullmatch(r'pi_mock_\d+_[0-9a-f]+', data['payment_intent_id'])
    assert re.fullmatch(r'pi_mock_\d+_secret_[0-9a-f]+', data['client_secret'])


def test_intent_does_not_touch_order(client, catalog):
    widget = catalog()
    order_id = place_order(client, [(widget.id, 1)]).get_json()['data']['id']
    _intent(client, order_id)
    order = client.get(f'/api/v1/orders/{order_id}').get_json()['data']
    assert order['payment_intent_id'] is None
    assert order['status'] == 'pending'


def test_intent_for_missing_order(client):
    resp = _intent(client, 5150)
    assert resp.status_code == 404


def test_guest_checkout_scenario(client, catalog):
    widget = catalog(name='Widget', price='29.99', stock=10)

    order = place_order(client, [(widget.id, 2)]).get_json()['data']
    assert order['total_amount'] == 59.98
    assert order['status'] == 'pending'

    intent = _intent(client, order['id']).get_json()['data']
    paid = client.post(
        f"/api/v1/orders/{order['id']}/status",
        json={'status': 'paid', 'payment_intent_id': intent['payment_intent_id']},
    ).get_json()['data']
    assert paid['status'] == 'paid'
    assert paid['payment_intent_id'] == intent['payment_intent_id']

    again = _intent(client, order['id'])
    assert again.status_code == 409
    assert again.get_json()['message'] == 'Cannot create payment intent for order with status: paid'


class RecordingProvider:
    name = 'recording'

    def __init__(self):
        self.calls = []

    def create_intent(self, *, order_id, amount_cents, currency):
        self.calls.append((order_id, amount_cents, currency))
        return PaymentIntent(payment_intent_id=f'pi_rec_{order_id}', client_secret='sec')


def test_custom_provider_receives_cents(app, client, catalog):
    widget = catalog(price='29.99')
    order_id = place_order(client, [(widget.id, 2)]).get_json()['data']['id']
    provider = RecordingProvider()
    intent = create_payment_intent(order_id, provider=provider)
    assert provider.calls == [(order_id, 5998, 'usd')]
    assert intent.payment_intent_id == f'pi_rec_{order_id}'


def test_configured_provider_is_used(app, client, catalog, monkeypatch):
    widget = catalog()
    order_id = place_order(client, [(widget.id, 1)]).get_json()['data']['id']
    provider = RecordingProvider()
    monkeypatch.setitem(app.extensions, 'payment_provider', provider)
    resp = _intent(client, order_id)
    assert resp.get_json()['data']['payment_intent_id'] == f'pi_rec_{order_id}'


def test_unknown_provider_name_fails_fast(app, monkeypatch):
    from app.services.payments import init_payments

    class Dummy:
        config = {'PAYMENT_PROVIDER': 'stripe'}
        extensions = {}

    with pytest.raises(RuntimeError, match='stripe'):
        init_payments(Dummy())


def test_mock_ids_are_unique():
    provider = MockPaymentProvider()
    first = provider.create_intent(order_id=1, amount_cents=100, currency='usd')
    second = provider.create_intent(order_id=1, amount_cents=100, currency='usd')
    assert first.payment_intent_id != second.payment_intent_id
