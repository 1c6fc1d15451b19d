# shop/domain/factories.py
import uuid

from shop.domain.entities import Address, Customer, Product


class CustomerFactory:
    @staticmethod
    def create(name: str) -> Customer:
        return Customer(id=str(uuid.uuid4()), name=name)

    @staticmethod
    def create_with_address(name: str, address: Address) -> Customer:
        customer = CustomerFactory.create(name)
        customer.change_address(address)
        return customer


class ProductFactory:
    @staticmethod
    def create(name: str, price: float) -> Product:
        return Product(id=str(uuid.uuid4()), name=name, price=price)
