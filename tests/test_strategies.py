import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from pricing.domain import CartLine, Category, DiscountRule, DiscountType, Product
from pricing.strategies import (
    STRATEGIES,
    amount_campaign_discount,
    amount_coupon_discount,
    rate_campaign_discount,
    rate_coupon_discount,
    strategy_for,
)

phone = Category("Phone")
iphone = Product("IPhone", 100, phone)


def lines(qty):
    return (CartLine(product=iphone, quantity=qty),)


def test_every_discount_type_has_strategy():
    assert set(STRATEGIES) == set(DiscountType)
    assert strategy_for(DiscountRule(10, 0, DiscountType.RATE)).campaign is rate_campaign_discount


def test_rate_campaign_takes_percent_of_subtotal():
    rule = DiscountRule(20, 2, DiscountType.RATE)
    assert rate_campaign_discount(lines(3), rule, 0.0) == pytest.approx(60)


def test_rate_campaign_never_decreases():
    rule = DiscountRule(20, 2, DiscountType.RATE)
    assert rate_campaign_discount(lines(3), rule, 100.0) == 100.0


def test_amount_campaign_requires_more_than_one_unit():
    rule = DiscountRule(20, 0, DiscountType.AMOUNT)
    assert amount_campaign_discount(lines(1), rule, 0.0) == 0.0
    assert amount_campaign_discount(lines(2), rule, 0.0) == 20


def test_amount_campaign_never_decreases():
    rule = DiscountRule(20, 2, DiscountType.AMOUNT)
    assert amount_campaign_discount(lines(5), rule, 40.0) == 40.0
    assert amount_campaign_discount(lines(5), rule, 20.0) == 20


def test_amount_campaign_is_not_clamped():
    """Фиксированная скидка может превысить сумму товаров"""
    rule = DiscountRule(500, 2, DiscountType.AMOUNT)
    assert amount_campaign_discount(lines(2), rule, 0.0) == 500


def test_coupon_strategies():
    assert rate_coupon_discount(200, DiscountRule(10, 100, DiscountType.RATE)) == pytest.approx(20)
    assert amount_coupon_discount(200, DiscountRule(10, 100, DiscountType.AMOUNT)) == 10
