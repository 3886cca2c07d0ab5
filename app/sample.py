import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pricing.config import DeliveryConfig
from pricing.delivery import DeliveryCostCalculator
from pricing.domain import Campaign, Category, Coupon, DiscountType, Product
from pricing.service import ShoppingCart

# ============ Каталог ============

phone = Category("Phone")
smart_phone = Category("SmartPhone", phone)
computer = Category("Computer")

CATEGORIES = (phone, smart_phone, computer)

iphone = Product("IPhone", 100, smart_phone)
samsung = Product("Samsung Galaxy S10", 150, smart_phone)
lg = Product("LG-5", 200, smart_phone)
thinkpad = Product("ThinkPad", 200, computer)

PRODUCTS = (iphone, samsung, lg, thinkpad)

# количество по умолчанию (IPhone добавляется дважды по одному)
DEFAULT_QUANTITIES = ((iphone, 1), (iphone, 1), (samsung, 4), (lg, 1), (thinkpad, 2))

# ============ Кампании и купон ============

CAMPAIGNS = (
    Campaign(smart_phone, 20, 3, DiscountType.RATE),
    Campaign(smart_phone, 40, 5, DiscountType.RATE),
    Campaign(smart_phone, 50, 2, DiscountType.AMOUNT),
    Campaign(computer, 20, 2, DiscountType.RATE),
)

COUPON = Coupon(1000, 150, DiscountType.AMOUNT)


def build_sample_cart(config: DeliveryConfig, items=DEFAULT_QUANTITIES) -> ShoppingCart:
    """Собирает демонстрационную корзину и применяет кампании и купон"""
    cart = ShoppingCart(DeliveryCostCalculator.from_config(config))
    for product, qty in items:
        cart.add_item(product, qty)
    cart.apply_discounts(*CAMPAIGNS)
    cart.apply_coupon(COUPON)
    return cart
