import os
import sys
from decimal import Decimal

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from models import db, Category, Store, Item


@pytest.fixture(scope='session')
def app_instance():
    from app import create_app
    from app.config import TestingConfig
    return create_app(TestingConfig)


@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture()
def catalog(app):
    """One category and one store; returns a helper that adds items to them."""
    category = Category(name='Electronics', description='Gadgets')
    store = Store(name='TechCo', owner_email='owner@techco.example')
    db.session.add_all([category, store])
    db.session.commit()

    def add_item(name='Widget', price='29.99', stock=10, **overrides):
        item = Item(
            name=name,
            price=Decimal(str(price)),
            stock_quantity=stock,
            images=overrides.pop('images', []),
            category_id=overrides.pop('category_id', category.id),
            store_id=overrides.pop('store_id', store.id),
            **overrides,
        )
        db.session.add(item)
        db.session.commit()
        return item

    add_item.category = category
    add_item.store = store
    return add_item


def place_order(client, lines, **guest):
    payload = {
        'guest_name': guest.get('guest_name', 'Ada Guest'),
        'guest_email': guest.get('guest_email', 'ada@example.com'),
        'guest_address': guest.get('guest_address', '1 Main St'),
        'items': [{'item_id': item_id, 'quantity': qty} for item_id, qty in lines],
    }
    return client.post('/api/v1/orders', json=payload)
