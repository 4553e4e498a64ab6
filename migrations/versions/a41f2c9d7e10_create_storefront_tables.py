"""create storefront catalog and order tables

Revision ID: a41f2c9d7e10
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a41f2c9d7e10'
down_revision = None
branch_labels = None
depends_on = None

BIGINT = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade():
    op.create_table(
        'categories',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'stores',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('owner_email', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_table(
        'items',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('category_id', BIGINT, nullable=False),
        sa.Column('store_id', BIGINT, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('price > 0', name='ck_items_price_positive'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_items_stock_non_negative'),
    )
    op.create_index('ix_items_category_id', 'items', ['category_id'])
    op.create_index('ix_items_store_id', 'items', ['store_id'])
    op.create_index('ix_items_created_at', 'items', ['created_at'])

    op.create_table(
        'orders',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('guest_name', sa.String(200), nullable=False),
        sa.Column('guest_email', sa.String(255), nullable=False),
        sa.Column('guest_address', sa.Text(), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('payment_intent_id', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_orders_created_at', 'orders', ['created_at'])

    op.create_table(
        'order_items',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('order_id', BIGINT, sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('item_id', BIGINT, nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price_at_time', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])

    op.create_table(
        'order_status_log',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('order_id', BIGINT, sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('from_status', sa.String(20), nullable=True),
        sa.Column('to_status', sa.String(20), nullable=False),
        sa.Column('payment_intent_id', sa.String(255), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_order_status_log_order_id', 'order_status_log', ['order_id'])


def downgrade():
    op.drop_index('ix_order_status_log_order_id', table_name='order_status_log')
    op.drop_table('order_status_log')
    op.drop_index('ix_order_items_order_id', table_name='order_items')
    op.drop_table('order_items')
    op.drop_index('ix_orders_created_at', table_name='orders')
    op.drop_table('orders')
    op.drop_index('ix_items_created_at', table_name='items')
    op.drop_index('ix_items_store_id', table_name='items')
    op.drop_index('ix_items_category_id', table_name='items')
    op.drop_table('items')
    op.drop_table('stores')
    op.drop_table('categories')
