# shop/main.py
import logging
import sys

from shop.config import AppConfig
from shop.domain.events import EventType
from shop.infrastructure.event_dispatcher import EventDispatcher
from shop.infrastructure.event_handlers import (
    Log1WhenCustomerIsCreatedHandler,
    Log2WhenCustomerIsCreatedHandler,
    LogWhenCustomerChangesAddressHandler,
    SendEmailWhenProductIsCreatedHandler,
)
from shop.interactors.customer_interactor import CustomerInteractor
from shop.interactors.product_interactor import ProductInteractor


class Application:
    def __init__(self, config: AppConfig):
        self.config = config
        self.logger = self.setup_logger()
        self.event_dispatcher = EventDispatcher(
            self.logger, thread_safe=config.EVENT_DISPATCHER_THREAD_SAFE
        )

        # Register event handlers
        self.event_dispatcher.register(
            EventType.PRODUCT_CREATED,
            SendEmailWhenProductIsCreatedHandler(config.NOTIFICATION_EMAIL, self.logger),
        )
        self.event_dispatcher.register(
            EventType.CUSTOMER_CREATED, Log1WhenCustomerIsCreatedHandler(self.logger)
        )
        self.event_dispatcher.register(
            EventType.CUSTOMER_CREATED, Log2WhenCustomerIsCreatedHandler(self.logger)
        )
        self.event_dispatcher.register(
            EventType.CUSTOMER_ADDRESS_CHANGED,
            LogWhenCustomerChangesAddressHandler(self.logger),
        )

        self.product_interactor = ProductInteractor(self.event_dispatcher)
        self.customer_interactor = CustomerInteractor(self.event_dispatcher)

    def setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.config.LOGGER_NAME)
        logger.setLevel(self.config.LOG_LEVEL)

        if not logger.handlers:
            c_handler = logging.StreamHandler(sys.stdout)
            c_handler.setFormatter(logging.Formatter(self.config.LOG_FORMAT))
            logger.addHandler(c_handler)

        return logger


def create() -> Application:
    config = AppConfig()
    application = Application(config)
    application.logger.info(
        f"{config.PROJECT_NAME} {config.PROJECT_VERSION} created and configured"
    )
    return application


if __name__ == "__main__":
    application = create()
    application.customer_interactor.create_customer("Customer 1")
