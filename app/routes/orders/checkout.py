from flask import request, current_app
from flask_limiter.util import get_remote_address
from extensions import limiter
from app.metrics import ORDERS_CREATED
from app.schemas.orders import CreateOrderRequest
from app.services import order_service
from app.utils import ok, transactional, validate_schema
from . import orders_bp


@orders_bp.route("", methods=["POST"])
@limiter.limit(
    lambda: current_app.config["ORDER_LIMIT_PER_IP"],
    key_func=get_remote_address,
    error_message="Too many orders from this IP",
)
@validate_schema(CreateOrderRequest)
def create_order():
    """Place a guest order
    ---
    tags:
      - Orders
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [guest_name, guest_email, guest_address, items]
          properties:
            guest_name: {type: string}
            guest_email: {type: string}
            guest_address: {type: string}
            items:
              type: array
              items:
                type: object
                properties:
                  item_id: {type: integer}
                  quantity: {type: integer}
    responses:
      201:
        description: Order placed in pending status
      400:
        description: Invalid input
      404:
        description: An item in the order does not exist
      429:
        description: Too many orders from this IP
    """
    with transactional("Order creation failed"):
        order = order_service.create_order(request.validated_data)
        payload = order.to_dict(include_items=True)
    ORDERS_CREATED.inc()
    return ok(payload, message="Order placed successfully", status=201)


@orders_bp.route("", methods=["GET"])
def list_orders():
    return ok([o.to_dict() for o in order_service.list_orders()])


@orders_bp.route("/<int:order_id>", methods=["GET"])
def get_order(order_id):
    """Fetch an order with its line items and status history
    ---
    tags:
      - Orders
    parameters:
      - {name: order_id, in: path, type: integer, required: true}
    responses:
      200:
        description: The order
      404:
        description: Order not found
    """
    return ok(order_service.get_order(order_id).to_dict(include_items=True))
