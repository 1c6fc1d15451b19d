# shop/interactors/product_interactor.py
from shop.domain.entities import Product
from shop.domain.events import ProductCreated, ProductInfo
from shop.domain.factories import ProductFactory
from shop.infrastructure.event_dispatcher import EventDispatcher


class ProductInteractor:
    def __init__(self, event_dispatcher: EventDispatcher):
        self.event_dispatcher = event_dispatcher

    def create_product(self, name: str, price: float, description: str = "") -> Product:
        product = ProductFactory.create(name, price)
        self.event_dispatcher.notify(
            ProductCreated(
                event_data=ProductInfo(
                    name=product.name, description=description, price=product.price
                )
            )
        )
        return product
