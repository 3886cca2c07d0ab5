from typing import Dict, List
from pricing.recursion import ancestry
from pricing.service import ShoppingCart

COLUMN_WIDTH = 20

HEADERS = (
    "Category Name",
    "Product Name",
    "Quantity",
    "Unit Price",
    "Total Price",
    "Total Discount(coupon,campaign)",
)


# ============ Разбивка корзины ============


def line_breakdown(cart: ShoppingCart) -> List[dict]:
    """
    Строки корзины, сгруппированные по названию категории
    (порядок групп - порядок первого появления категории)
    """
    titles = list(dict.fromkeys(line.product.category.title for line in cart.lines))

    return [
        {
            "category": title,
            "category_path": " > ".join(
                c.title for c in reversed(ancestry(line.product.category))
            ),
            "product": line.product.title,
            "quantity": line.quantity,
            "unit_price": line.product.price,
            "total_price": line.subtotal(),
            "campaign_discount": cart.get_campaign_discount_by_product(line.product),
            "coupon_discount": cart.get_coupon_discount_by_product(line.product),
            "total_discount": cart.get_total_discounts_by_product(line.product),
        }
        for title in titles
        for line in cart.lines
        if line.product.category.title == title
    ]


def cart_summary(cart: ShoppingCart) -> Dict[str, float]:
    """Итоговые суммы корзины"""
    return {
        "total_amount": cart.get_total_amount(),
        "campaign_discount": cart.get_campaign_discount(),
        "coupon_discount": cart.get_coupon_discount(),
        "total_discounts": cart.get_total_discounts(),
        "total_after_discounts": cart.get_total_amount_after_discounts(),
        "delivery_cost": cart.get_delivery_cost(),
        "deliveries": cart.get_number_of_deliveries(),
        "products": cart.get_number_of_products(),
    }


def cart_breakdown(cart: ShoppingCart) -> dict:
    """Нормализованная разбивка: строки + итоги"""
    return {"lines": line_breakdown(cart), "summary": cart_summary(cart)}


# ============ Текстовый отчёт ============


def _cell(value) -> str:
    return f"{value:>{COLUMN_WIDTH}}"


def print_report(cart: ShoppingCart) -> str:
    """Табличный отчёт по корзине: строки, общая сумма и стоимость доставки"""
    separator = "-" * (7 * COLUMN_WIDTH)
    rows = [
        "  ".join(_cell(h) for h in HEADERS),
        separator,
        *(
            " ".join(
                _cell(row[key])
                for key in (
                    "category",
                    "product",
                    "quantity",
                    "unit_price",
                    "total_price",
                    "total_discount",
                )
            )
            for row in line_breakdown(cart)
        ),
        separator,
        f"Total Amount  {_cell('Delivery Cost')}",
        f" {cart.get_total_amount()}  {_cell(cart.get_delivery_cost())}",
    ]
    return "\n".join(rows) + "\n"
