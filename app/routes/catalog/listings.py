from app.services import catalog, search
from app.utils import ok
from . import catalog_bp


@catalog_bp.route("/categories", methods=["GET"])
def list_categories():
    return ok([c.to_dict() for c in catalog.list_categories()])


@catalog_bp.route("/stores", methods=["GET"])
def list_stores():
    return ok([s.to_dict() for s in catalog.list_stores()])


@catalog_bp.route("/categories/<int:category_id>/items", methods=["GET"])
def items_by_category(category_id):
    return ok(search.items_by_category(category_id))


@catalog_bp.route("/stores/<int:store_id>/items", methods=["GET"])
def items_by_store(store_id):
    return ok(search.items_by_store(store_id))
