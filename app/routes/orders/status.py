from flask import request
from app.metrics import ORDER_STATUS_TRANSITIONS
from app.schemas.orders import UpdateOrderStatusRequest
from app.services import order_service
from app.utils import ok, transactional, validate_schema
from . import orders_bp


@orders_bp.route("/<int:order_id>/status", methods=["POST"])
@validate_schema(UpdateOrderStatusRequest)
def update_order_status(order_id):
    """Move an order to a new status
    ---
    tags:
      - Orders
    parameters:
      - {name: order_id, in: path, type: integer, required: true}
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [status]
          properties:
            status: {type: string, enum: [pending, paid, shipped, delivered, cancelled]}
            payment_intent_id: {type: string}
    responses:
      200:
        description: Order updated
      404:
        description: Order not found
      409:
        description: Transition not allowed from the current status
    """
    data = request.validated_data
    with transactional("Order status update failed"):
        order = order_service.update_order_status(
            order_id, data.status, payment_intent_id=data.payment_intent_id
        )
        payload = order.to_dict(include_items=True)
    ORDER_STATUS_TRANSITIONS.labels(data.status.value).inc()
    return ok(payload, message="Order status updated")
