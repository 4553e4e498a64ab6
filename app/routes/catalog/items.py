from flask import request
from app.schemas.search import SearchItemsRequest
from app.services import search
from app.utils import ok, validate_schema
from . import catalog_bp


@catalog_bp.route("/items/search", methods=["GET"])
@validate_schema(SearchItemsRequest, source="args")
def search_items():
    """Search catalog items
    ---
    tags:
      - Catalog
    parameters:
      - {name: query, in: query, type: string, description: case-insensitive substring of the item name}
      - {name: category_id, in: query, type: integer}
      - {name: store_id, in: query, type: integer}
      - {name: min_price, in: query, type: number}
      - {name: max_price, in: query, type: number}
      - {name: in_stock_only, in: query, type: boolean}
      - {name: limit, in: query, type: integer, default: 20}
      - {name: offset, in: query, type: integer, default: 0}
    responses:
      200:
        description: Matching items, newest first, with their category and store
      400:
        description: Invalid filter values
    """
    return ok(search.search_items(request.validated_data))


@catalog_bp.route("/items/<int:item_id>", methods=["GET"])
def get_item(item_id):
    """Fetch one item with its category and store
    ---
    tags:
      - Catalog
    parameters:
      - {name: item_id, in: path, type: integer, required: true}
    responses:
      200:
        description: The item
      404:
        description: Item not found
    """
    return ok(search.get_item_with_relations(item_id))
