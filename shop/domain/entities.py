# shop/domain/entities.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    zip: str
    city: str

    def __str__(self) -> str:
        return f"{self.street} {self.number}, {self.zip} {self.city}"


@dataclass
class Customer:
    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self):
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValueError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        self.reward_points += points


@dataclass
class Product:
    id: str
    name: str
    price: float

    def __post_init__(self):
        if not self.id:
            raise ValueError("Id is required")
        if not self.name:
            raise ValueError("Name is required")
        if self.price < 0:
            raise ValueError("Price must be greater than or equal to zero")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValueError("Name is required")
        self.name = name

    def change_price(self, price: float) -> None:
        if price < 0:
            raise ValueError("Price must be greater than or equal to zero")
        self.price = price
