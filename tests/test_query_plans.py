from sqlalchemy import text, inspect
from models import db


def _index_names(table):
    return {ix['name'] for ix in inspect(db.engine).get_indexes(table)}


def test_catalog_and_order_indexes_exist(app):
    assert {'ix_items_category_id', 'ix_items_store_id', 'ix_items_created_at'} <= _index_names('items')
    assert 'ix_orders_created_at' in _index_names('orders')
    assert 'ix_order_items_order_id' in _index_names('order_items')
    assert 'ix_order_status_log_order_id' in _index_names('order_status_log')


def test_category_filter_uses_index(app, catalog):
    catalog()
    plan_rows = db.session.execute(text("EXPLAIN QUERY PLAN SELECT * FROM items WHERE category_id=1"))
    plan = " ".join(r[3] for r in plan_rows)
    assert 'ix_items_category_id' in plan
