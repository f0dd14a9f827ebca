"""Fulfillment — default order collaborator that records and logs orders.

Invariants:
    - Every received order is appended to `orders` and logged exactly once
    - Returns an OrderConfirmation carrying the snapshot's order_id

Design Decisions:
    - In-memory stub: real transmission (payment, shipping) is out of scope;
      swap in another FulfillmentGateway implementation to transmit orders
"""

import logging

from storefront.core.order import OrderConfirmation, OrderSnapshot
from storefront.core.pricing import round_money

logger = logging.getLogger(__name__)


class LoggingFulfillment:
    """FulfillmentGateway that keeps orders in memory."""

    def __init__(self):
        self.orders: list[OrderSnapshot] = []

    def submit_order(self, order: OrderSnapshot) -> OrderConfirmation:
        self.orders.append(order)
        logger.info(
            f"Order received: {order.item_count} item(s), "
            f"total {round_money(order.total)}",
            extra={"order_id": order.order_id},
        )
        return OrderConfirmation(order_id=order.order_id)
