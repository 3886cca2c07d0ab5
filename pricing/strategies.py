from dataclasses import dataclass
from typing import Callable, Dict, Tuple
from .domain import CartLine, DiscountRule, DiscountType

# Стратегии скидок - чистые функции, выбираемые по DiscountType.
# Скидка кампании никогда не уменьшает текущее значение, ограничения сверху нет.


def total_quantity(lines: Tuple[CartLine, ...]) -> int:
    return sum(line.quantity for line in lines)


def subtotal(lines: Tuple[CartLine, ...]) -> float:
    return sum(line.subtotal() for line in lines)


def amount_campaign_discount(
    lines: Tuple[CartLine, ...], rule: DiscountRule, current: float
) -> float:
    """Фиксированная скидка: нужна больше чем одна единица товара в области кампании"""
    if total_quantity(lines) > 1 and rule.value >= current:
        return rule.value
    return current


def amount_coupon_discount(total_amount: float, rule: DiscountRule) -> float:
    return rule.value


def rate_campaign_discount(
    lines: Tuple[CartLine, ...], rule: DiscountRule, current: float
) -> float:
    """Процент от суммы товаров в области кампании"""
    candidate = subtotal(lines) * (rule.value / 100)
    return candidate if candidate > current else current


def rate_coupon_discount(total_amount: float, rule: DiscountRule) -> float:
    return total_amount * (rule.value / 100)


@dataclass(frozen=True)
class DiscountStrategy:
    campaign: Callable[[Tuple[CartLine, ...], DiscountRule, float], float]
    coupon: Callable[[float, DiscountRule], float]


STRATEGIES: Dict[DiscountType, DiscountStrategy] = {
    DiscountType.RATE: DiscountStrategy(rate_campaign_discount, rate_coupon_discount),
    DiscountType.AMOUNT: DiscountStrategy(
        amount_campaign_discount, amount_coupon_discount
    ),
}


def strategy_for(rule: DiscountRule) -> DiscountStrategy:
    return STRATEGIES[rule.discount_type]
