# shop/domain/events.py
from datetime import UTC, datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from shop.domain.entities import Address


class EventType(StrEnum):
    PRODUCT_CREATED = "ProductCreated"
    CUSTOMER_CREATED = "CustomerCreated"
    CUSTOMER_ADDRESS_CHANGED = "CustomerAddressChanged"


class Event(BaseModel):
    """Immutable record of something that happened.

    Concrete events set the ``event_type`` tag; the dispatcher routes on it.
    """

    model_config = ConfigDict(frozen=True)

    event_type: ClassVar[str]

    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class AddressInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    number: int
    zip: str
    city: str

    @classmethod
    def from_address(cls, address: Address) -> "AddressInfo":
        return cls(
            street=address.street,
            number=address.number,
            zip=address.zip,
            city=address.city,
        )


class ProductInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    price: float


class CustomerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: AddressInfo | None = None
    active: bool = False
    reward_points: int = 0


class CustomerAddressInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    address: AddressInfo


class ProductCreated(Event):
    event_type: ClassVar[str] = EventType.PRODUCT_CREATED

    event_data: ProductInfo


class CustomerCreated(Event):
    event_type: ClassVar[str] = EventType.CUSTOMER_CREATED

    event_data: CustomerInfo


class CustomerAddressChanged(Event):
    event_type: ClassVar[str] = EventType.CUSTOMER_ADDRESS_CHANGED

    event_data: CustomerAddressInfo
