# shop/infrastructure/event_handlers.py
import logging

from shop.domain.events import CustomerAddressChanged, CustomerCreated, ProductCreated
from shop.domain.interfaces import EventHandler


class SendEmailWhenProductIsCreatedHandler(EventHandler[ProductCreated]):
    # email delivery is simulated with a log line
    def __init__(self, recipient: str, logger: logging.Logger | None = None):
        self.recipient = recipient
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, event: ProductCreated) -> None:
        self.logger.info(
            f"Sending email to {self.recipient}: "
            f"product {event.event_data.name} created"
        )


class Log1WhenCustomerIsCreatedHandler(EventHandler[CustomerCreated]):
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, event: CustomerCreated) -> None:
        self.logger.info("This is the first event log: CustomerCreated")


class Log2WhenCustomerIsCreatedHandler(EventHandler[CustomerCreated]):
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, event: CustomerCreated) -> None:
        self.logger.info("This is the second event log: CustomerCreated")


class LogWhenCustomerChangesAddressHandler(EventHandler[CustomerAddressChanged]):
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, event: CustomerAddressChanged) -> None:
        data = event.event_data
        address = data.address
        self.logger.info(
            f"Customer address: {data.id}, {data.name} changed to: "
            f"{address.zip}, {address.city}, {address.street} {address.number}"
        )
