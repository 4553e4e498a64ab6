from app.services.payments import create_payment_intent
from app.utils import ok
from . import orders_bp


@orders_bp.route("/<int:order_id>/payment-intent", methods=["POST"])
def payment_intent(order_id):
    """Issue a payment intent for a pending order
    ---
    tags:
      - Orders
    parameters:
      - {name: order_id, in: path, type: integer, required: true}
    responses:
      200:
        description: client_secret and payment_intent_id
      404:
        description: Order not found
      409:
        description: Order is not pending
    """
    return ok(create_payment_intent(order_id).to_dict(), message="Payment intent created")
