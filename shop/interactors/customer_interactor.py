# shop/interactors/customer_interactor.py
from shop.domain.entities import Address, Customer
from shop.domain.events import (
    AddressInfo,
    CustomerAddressChanged,
    CustomerAddressInfo,
    CustomerCreated,
    CustomerInfo,
)
from shop.domain.factories import CustomerFactory
from shop.infrastructure.event_dispatcher import EventDispatcher


class CustomerInteractor:
    def __init__(self, event_dispatcher: EventDispatcher):
        self.event_dispatcher = event_dispatcher

    def create_customer(self, name: str, address: Address | None = None) -> Customer:
        if address is None:
            customer = CustomerFactory.create(name)
        else:
            customer = CustomerFactory.create_with_address(name, address)

        self.event_dispatcher.notify(
            CustomerCreated(
                event_data=CustomerInfo(
                    name=customer.name,
                    address=AddressInfo.from_address(address) if address else None,
                    active=customer.active,
                    reward_points=customer.reward_points,
                )
            )
        )
        return customer

    def change_address(self, customer: Customer, address: Address) -> Customer:
        customer.change_address(address)
        self.event_dispatcher.notify(
            CustomerAddressChanged(
                event_data=CustomerAddressInfo(
                    id=customer.id,
                    name=customer.name,
                    address=AddressInfo.from_address(address),
                )
            )
        )
        return customer
