from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiscountType(Enum):
    RATE = "rate"
    AMOUNT = "amount"


# eq=False: категории и товары сравниваются по ссылке, а не по значению


@dataclass(frozen=True, eq=False)
class Category:
    title: str
    parent: Optional["Category"] = None


@dataclass(frozen=True, eq=False)
class Product:
    title: str
    price: float
    category: Category


@dataclass
class CartLine:
    """Строка корзины: товар и его количество (количество изменяемо)"""

    product: Product
    quantity: int

    def subtotal(self) -> float:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class DiscountRule:
    """
    Правило скидки.
    value   - процент (RATE) или фиксированная сумма (AMOUNT)
    minimum - для кампании минимальное количество, для купона минимальная сумма корзины
    """

    value: float
    minimum: float
    discount_type: DiscountType


@dataclass(frozen=True)
class Campaign:
    category: Category
    rule: DiscountRule

    def __init__(
        self,
        category: Category,
        value: float,
        min_quantity: int,
        discount_type: DiscountType,
    ):
        object.__setattr__(self, "category", category)
        object.__setattr__(
            self, "rule", DiscountRule(value, min_quantity, discount_type)
        )


@dataclass(frozen=True)
class Coupon:
    rule: DiscountRule

    def __init__(self, min_amount: float, value: float, discount_type: DiscountType):
        object.__setattr__(
            self, "rule", DiscountRule(value, min_amount, discount_type)
        )
