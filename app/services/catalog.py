from typing import List

from models import db, utcnow
from models.category import Category
from models.item import Item
from models.store import Store
from app.schemas.catalog import (
    CreateCategoryRequest,
    CreateStoreRequest,
    CreateItemRequest,
    UpdateItemRequest,
)
from app.services.errors import NotFoundError
from app.utils.money import to_money


def create_category(data: CreateCategoryRequest) -> Category:
    category = Category(name=data.name, description=data.description)
    db.session.add(category)
    db.session.flush()
    return category


def list_categories() -> List[Category]:
    return Category.query.order_by(Category.id.asc()).all()


def get_category(category_id: int) -> Category:
    category = db.session.get(Category, category_id)
    if category is None:
        raise NotFoundError("Category", category_id)
    return category


def create_store(data: CreateStoreRequest) -> Store:
    store = Store(name=data.name, description=data.description, owner_email=data.owner_email)
    db.session.add(store)
    db.session.flush()
    return store


def list_stores() -> List[Store]:
    return Store.query.order_by(Store.id.asc()).all()


def get_store(store_id: int) -> Store:
    store = db.session.get(Store, store_id)
    if store is None:
        raise NotFoundError("Store", store_id)
    return store


def get_item(item_id: int) -> Item:
    item = db.session.get(Item, item_id)
    if item is None:
        raise NotFoundError("Item", item_id)
    return item


def create_item(data: CreateItemRequest) -> Item:
    get_category(data.category_id)
    get_store(data.store_id)
    item = Item(
        name=data.name,
        description=data.description,
        price=to_money(data.price),
        stock_quantity=data.stock_quantity,
        images=list(data.images),
        category_id=data.category_id,
        store_id=data.store_id,
    )
    db.session.add(item)
    db.session.flush()
    return item


def update_item(item_id: int, data: UpdateItemRequest) -> Item:
    item = get_item(item_id)
    changes = data.changes()
    if "category_id" in changes:
        get_category(changes["category_id"])
    if "store_id" in changes:
        get_store(changes["store_id"])
    if "price" in changes:
        changes["price"] = to_money(changes["price"])
    if "images" in changes:
        changes["images"] = list(changes["images"])
    for field, value in changes.items():
        setattr(item, field, value)
    item.updated_at = utcnow()
    db.session.flush()
    return item
