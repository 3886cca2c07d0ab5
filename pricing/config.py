"""
Настройки стоимости доставки
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_FIXED_COST = 2.99


@dataclass(frozen=True)
class DeliveryConfig:
    cost_per_delivery: float = 2.0
    cost_per_product: float = 5.0
    fixed_cost: float = DEFAULT_FIXED_COST


def load_config() -> DeliveryConfig:
    """
    Читает CART_COST_PER_DELIVERY, CART_COST_PER_PRODUCT, CART_FIXED_COST
    из окружения (и .env, если он есть). Нечисловое значение -> ValueError.
    """
    load_dotenv()
    defaults = DeliveryConfig()
    return DeliveryConfig(
        cost_per_delivery=float(
            os.getenv("CART_COST_PER_DELIVERY", defaults.cost_per_delivery)
        ),
        cost_per_product=float(
            os.getenv("CART_COST_PER_PRODUCT", defaults.cost_per_product)
        ),
        fixed_cost=float(os.getenv("CART_FIXED_COST", defaults.fixed_cost)),
    )
