# shop/domain/interfaces.py
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shop.domain.events import Event

E = TypeVar("E", bound=Event)


class EventHandler(ABC, Generic[E]):
    @abstractmethod
    def handle(self, event: E) -> None:
        pass
