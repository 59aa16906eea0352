"""
App composition: the dispatcher comes from EventsModule; listeners by
callable, by container identifier and via a subscriber.
Run from this directory: python main.py
"""
import asyncio

from herald import Application, EventsModule, load_config_from_env

from domain import Order, OrderShipped
from listeners import NotifyCustomer, OrderAuditSubscriber

audit = OrderAuditSubscriber()

app = Application(config=load_config_from_env())
app.container.register("listeners.notify_customer", NotifyCustomer, singleton=False)
app.register(
    EventsModule()
    .listen("OrderShipped", "listeners.notify_customer")
    .subscribe(audit)
)
Order.set_event_dispatcher(app.events)


async def main() -> None:
    print(await Order("o-1", 1250).save())
    print(await Order("o-2", 0).save())
    shipped = OrderShipped(order_id="o-1", carrier="DHL")
    print(await app.events.dispatch(shipped, [shipped]))
    print(audit.lines)


if __name__ == "__main__":
    asyncio.run(main())
