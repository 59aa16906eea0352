"""Listeners and a subscriber for the shop example."""
from __future__ import annotations

from typing import Any

from herald.events import EventDispatcher

from domain import Order, OrderShipped


class NotifyCustomer:
    """Resolved from the container as "listeners.notify_customer" on every dispatch."""

    async def handle(self, event: OrderShipped) -> str:
        return f"order {event.order_id} shipped with {event.carrier}"


class OrderAuditSubscriber:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def subscribe(self, events: EventDispatcher) -> None:
        events.listen(Order.model_event_name("saving"), self.reject_empty)
        events.listen("model.*: Order", self.audit)

    def reject_empty(self, order: Order) -> Any:
        return False if order.total_cents <= 0 else None

    def audit(self, event: str, payload: list[Any]) -> None:
        self.lines.append(event)
