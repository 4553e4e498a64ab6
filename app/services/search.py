"""Item search: optional filters composed into one query over the catalog join.

Every filter that is supplied becomes one predicate and the predicates are
AND-ed together. Items are joined to their category and store with inner
joins, so an item whose category or store row has gone missing is left out
of every listing rather than returned half-populated.
"""
import logging
from typing import List

from models import db
from models.category import Category
from models.item import Item
from models.store import Store
from app.schemas.search import SearchItemsRequest
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def _joined_items():
    return (
        db.session.query(Item, Category, Store)
        .join(Category, Item.category_id == Category.id)
        .join(Store, Item.store_id == Store.id)
    )


def _newest_first(query):
    return query.order_by(Item.created_at.desc(), Item.id.desc())


def item_with_relations(item: Item, category: Category, store: Store) -> dict:
    data = item.to_dict()
    data["category"] = category.to_dict()
    data["store"] = store.to_dict()
    return data


def build_filters(params: SearchItemsRequest) -> list:
    conditions = []
    if params.query is not None:
        conditions.append(Item.name.icontains(params.query, autoescape=True))
    if params.category_id is not None:
        conditions.append(Item.category_id == params.category_id)
    if params.store_id is not None:
        conditions.append(Item.store_id == params.store_id)
    if params.min_price is not None:
        conditions.append(Item.price >= params.min_price)
    if params.max_price is not None:
        conditions.append(Item.price <= params.max_price)
    if params.in_stock_only:
        conditions.append(Item.stock_quantity >= 1)
    return conditions


def search_items(params: SearchItemsRequest) -> List[dict]:
    conditions = build_filters(params)
    query = _joined_items()
    if conditions:
        query = query.filter(db.and_(*conditions))
    rows = _newest_first(query).limit(params.limit).offset(params.offset).all()
    logger.debug(
        "item search: %d predicate(s), limit=%s offset=%s -> %d row(s)",
        len(conditions), params.limit, params.offset, len(rows),
    )
    return [item_with_relations(*row) for row in rows]


def get_item_with_relations(item_id: int) -> dict:
    row = _joined_items().filter(Item.id == item_id).first()
    if row is None:
        raise NotFoundError("Item", item_id)
    return item_with_relations(*row)


def items_by_category(category_id: int) -> List[dict]:
    rows = _newest_first(_joined_items().filter(Item.category_id == category_id)).all()
    return [item_with_relations(*row) for row in rows]


def items_by_store(store_id: int) -> List[dict]:
    rows = _newest_first(_joined_items().filter(Item.store_id == store_id)).all()
    return [item_with_relations(*row) for row in rows]
