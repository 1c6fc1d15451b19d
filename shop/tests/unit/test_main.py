# shop/tests/unit/test_main.py
import logging
import threading
from contextlib import nullcontext

import pytest

from shop.config import AppConfig
from shop.domain.entities import Address
from shop.infrastructure.event_handlers import (
    Log1WhenCustomerIsCreatedHandler,
    Log2WhenCustomerIsCreatedHandler,
    LogWhenCustomerChangesAddressHandler,
    SendEmailWhenProductIsCreatedHandler,
)
from shop.main import Application, create


@pytest.fixture
def config():
    return AppConfig(LOGGER_NAME="test_shop_app", LOG_LEVEL="DEBUG")


def test_config_defaults():
    config = AppConfig(_env_file=None)

    assert config.PROJECT_NAME == "Shop Events"
    assert config.LOG_LEVEL == "INFO"
    assert config.EVENT_DISPATCHER_THREAD_SAFE is False


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("EVENT_DISPATCHER_THREAD_SAFE", "true")
    monkeypatch.setenv("NOTIFICATION_EMAIL", "ops@shop.local")

    config = AppConfig(_env_file=None)

    assert config.EVENT_DISPATCHER_THREAD_SAFE is True
    assert config.NOTIFICATION_EMAIL == "ops@shop.local"


def test_application_registers_handlers(config):
    application = Application(config)
    handlers = application.event_dispatcher.event_handlers

    assert [type(h) for h in handlers["ProductCreated"]] == [
        SendEmailWhenProductIsCreatedHandler
    ]
    assert [type(h) for h in handlers["CustomerCreated"]] == [
        Log1WhenCustomerIsCreatedHandler,
        Log2WhenCustomerIsCreatedHandler,
    ]
    assert [type(h) for h in handlers["CustomerAddressChanged"]] == [
        LogWhenCustomerChangesAddressHandler
    ]


def test_application_logger_is_configured_once(config):
    first = Application(config)
    second = Application(config)

    assert first.logger is second.logger
    assert first.logger.level == logging.DEBUG
    assert len(first.logger.handlers) == 1


def test_application_thread_safe_dispatcher():
    config = AppConfig(LOGGER_NAME="test_shop_app", EVENT_DISPATCHER_THREAD_SAFE=True)

    application = Application(config)

    assert not isinstance(application.event_dispatcher._lock, nullcontext)
    assert isinstance(application.event_dispatcher._lock, type(threading.RLock()))


def test_application_end_to_end(config, caplog):
    caplog.set_level(logging.INFO)
    application = Application(config)

    application.product_interactor.create_product("Product 1", 10.0)
    customer = application.customer_interactor.create_customer(
        "John", Address("Street", 1, "13330-250", "City")
    )
    application.customer_interactor.change_address(
        customer, Address("Street 2", 2, "12220-340", "City 2")
    )

    messages = [r.getMessage() for r in caplog.records if r.name == "test_shop_app"]
    assert messages == [
        "Sending email to sales@shop.local: product Product 1 created",
        "This is the first event log: CustomerCreated",
        "This is the second event log: CustomerCreated",
        f"Customer address: {customer.id}, John changed to: 12220-340, City 2, Street 2 2",
    ]


def test_create(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setenv("LOGGER_NAME", "test_shop_create")

    application = create()

    assert isinstance(application, Application)
    assert "Shop Events 1.0.0 created and configured" in caplog.text
