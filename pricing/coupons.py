import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from .campaigns import allocate
from .domain import CartLine, Coupon, Product
from .ftypes import Either
from .strategies import strategy_for, subtotal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CouponResult:
    total_discount: float = 0.0
    by_product: Dict[Product, float] = field(default_factory=dict)


def check_eligibility(
    total_amount: float, coupon: Optional[Coupon]
) -> Either[str, Coupon]:
    """Left(причина), если купон не применим; Right(coupon) иначе"""
    if coupon is None:
        return Either.left("купон не задан")
    if total_amount < coupon.rule.minimum:
        return Either.left(
            f"сумма корзины {total_amount:.2f} меньше минимума {coupon.rule.minimum:.2f}"
        )
    return Either.right(coupon)


def calculate_coupon_discount(
    lines: Tuple[CartLine, ...], coupon: Optional[Coupon]
) -> CouponResult:
    """
    Скидка купона на всю корзину.
    Считается от суммы без учёта скидок кампаний и распределяется по всем строкам.
    """
    total_amount = subtotal(lines)
    eligible = check_eligibility(total_amount, coupon)

    if eligible.is_left:
        logger.debug("Купон не применён: %s", eligible.value)
        return CouponResult()

    rule = eligible.value.rule
    total_discount = strategy_for(rule).coupon(total_amount, rule)
    logger.info("Скидка купона: %.2f", total_discount)

    return CouponResult(
        total_discount=total_discount,
        by_product=allocate(lines, total_amount, total_discount),
    )
