import logging
from typing import Dict, List, Optional, Tuple
from .campaigns import calculate_campaign_discounts
from .coupons import calculate_coupon_discount
from .delivery import DeliveryCostCalculator
from .domain import Campaign, CartLine, Coupon, Product
from .ftypes import Maybe
from .strategies import subtotal

logger = logging.getLogger(__name__)


class ShoppingCart:
    """
    Корзина: владеет строками и результатами скидок.
    apply_discounts / apply_coupon пересчитывают скидки заново при каждом вызове,
    повторный вызов заменяет прежний результат.
    """

    def __init__(self, delivery_cost_calculator: DeliveryCostCalculator):
        self.delivery_cost_calculator = delivery_cost_calculator
        self._lines: List[CartLine] = []
        self._campaign_discounts: Dict[Product, float] = {}
        self._coupon_discounts: Dict[Product, float] = {}
        self._total_coupon_discount = 0.0

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def find_line(self, product: Product) -> Maybe[CartLine]:
        found = next((line for line in self._lines if line.product is product), None)
        return Maybe.some(found) if found is not None else Maybe.nothing()

    def add_item(self, product: Optional[Product], quantity: int) -> None:
        """Добавляет товар; если он уже есть - увеличивает количество"""
        if product is None or quantity <= 0:
            return

        line = self.find_line(product)
        if line.is_some():
            line.value.quantity += quantity
        else:
            self._lines.append(CartLine(product=product, quantity=quantity))

    def apply_discounts(self, *campaigns: Campaign) -> None:
        self._campaign_discounts = calculate_campaign_discounts(self.lines, campaigns)
        logger.info(
            "Применено кампаний: %d, скидка %.2f",
            len(campaigns),
            self.get_campaign_discount(),
        )

    def apply_coupon(self, coupon: Optional[Coupon]) -> None:
        result = calculate_coupon_discount(self.lines, coupon)
        self._coupon_discounts = result.by_product
        self._total_coupon_discount = result.total_discount

    # ============ Счётчики ============

    def get_number_of_deliveries(self) -> int:
        """Число различных категорий (по названию) в корзине"""
        return len({line.product.category.title for line in self._lines})

    def get_number_of_products(self) -> int:
        """Число различных товаров, не единиц"""
        return len(self._lines)

    # ============ Суммы ============

    def get_total_amount(self) -> float:
        return subtotal(self.lines)

    def get_campaign_discount(self) -> float:
        return round(sum(self._campaign_discounts.values()), 2)

    def get_coupon_discount(self) -> float:
        return round(self._total_coupon_discount, 2)

    def get_total_discounts(self) -> float:
        return self.get_campaign_discount() + self.get_coupon_discount()

    def get_total_amount_after_discounts(self) -> float:
        return (
            self.get_total_amount()
            - self.get_campaign_discount()
            - self.get_coupon_discount()
        )

    def get_campaign_discount_by_product(self, product: Product) -> float:
        return self._campaign_discounts.get(product, 0.0)

    def get_coupon_discount_by_product(self, product: Product) -> float:
        return self._coupon_discounts.get(product, 0.0)

    def get_total_discounts_by_product(self, product: Product) -> float:
        return round(
            self.get_campaign_discount_by_product(product)
            + self.get_coupon_discount_by_product(product),
            2,
        )

    def get_delivery_cost(self) -> float:
        return self.delivery_cost_calculator.calculate_for(self)
