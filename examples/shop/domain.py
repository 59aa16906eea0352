"""Shop domain: one model with lifecycle events and one structured event."""
from __future__ import annotations

from dataclasses import dataclass

from herald.domain import DomainEvent, Observable


@dataclass
class OrderShipped(DomainEvent):
    order_id: str
    carrier: str


class Order(Observable):
    def __init__(self, id: str, total_cents: int) -> None:
        self.id = id
        self.total_cents = total_cents

    async def save(self) -> bool:
        if not await self.fire_model_event("saving"):
            return False
        await self.fire_model_event("saved", halt=False)
        return True
