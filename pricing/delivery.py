from typing import Optional, Protocol
from .config import DEFAULT_FIXED_COST, DeliveryConfig


class DeliveryCountSource(Protocol):
    """Всё, что умеет сообщить число доставок и число товаров (корзина или тестовый двойник)"""

    def get_number_of_deliveries(self) -> int: ...

    def get_number_of_products(self) -> int: ...


class DeliveryCostCalculator:
    """
    cost = cost_per_delivery * доставки + cost_per_product * товары + fixed_cost
    Пустая корзина (или её отсутствие) доставки не стоит.
    """

    def __init__(
        self,
        cost_per_delivery: float,
        cost_per_product: float,
        fixed_cost: float = DEFAULT_FIXED_COST,
    ):
        self.cost_per_delivery = cost_per_delivery
        self.cost_per_product = cost_per_product
        self.fixed_cost = fixed_cost

    @classmethod
    def from_config(cls, config: DeliveryConfig) -> "DeliveryCostCalculator":
        return cls(config.cost_per_delivery, config.cost_per_product, config.fixed_cost)

    def calculate_for(self, cart: Optional[DeliveryCountSource]) -> float:
        if cart is None:
            return 0
        deliveries = cart.get_number_of_deliveries()
        if deliveries == 0:
            return 0
        return (
            self.cost_per_delivery * deliveries
            + self.cost_per_product * cart.get_number_of_products()
            + self.fixed_cost
        )
