from flask import request
from app.schemas.catalog import (
    CreateCategoryRequest,
    CreateStoreRequest,
    CreateItemRequest,
    UpdateItemRequest,
)
from app.services import catalog
from app.utils import ok, transactional, validate_schema
from . import admin_bp


@admin_bp.route("/categories", methods=["POST"])
@validate_schema(CreateCategoryRequest)
def create_category():
    with transactional("Failed to create category"):
        category = catalog.create_category(request.validated_data)
    return ok(category.to_dict(), message="Category created", status=201)


@admin_bp.route("/stores", methods=["POST"])
@validate_schema(CreateStoreRequest)
def create_store():
    with transactional("Failed to create store"):
        store = catalog.create_store(request.validated_data)
    return ok(store.to_dict(), message="Store created", status=201)


@admin_bp.route("/items", methods=["POST"])
@validate_schema(CreateItemRequest)
def create_item():
    """Add an item to a store
    ---
    tags:
      - Admin
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, price, category_id, store_id]
          properties:
            name: {type: string}
            description: {type: string}
            price: {type: number}
            stock_quantity: {type: integer}
            images: {type: array, items: {type: string}}
            category_id: {type: integer}
            store_id: {type: integer}
    responses:
      201:
        description: Item created
      404:
        description: Category or store not found
    """
    with transactional("Failed to create item"):
        item = catalog.create_item(request.validated_data)
    return ok(item.to_dict(), message="Item created", status=201)


@admin_bp.route("/items/<int:item_id>/update", methods=["POST"])
@validate_schema(UpdateItemRequest)
def update_item(item_id):
    with transactional("Failed to update item"):
        item = catalog.update_item(item_id, request.validated_data)
    return ok(item.to_dict(), message="Item updated")
