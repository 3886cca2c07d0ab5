import sys
import os
import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.sample import CAMPAIGNS, COUPON, PRODUCTS, DEFAULT_QUANTITIES, build_sample_cart
from pricing.config import load_config
from pricing.domain import DiscountType
from Report_Service.report import cart_breakdown, print_report


# ============ Кэширование настроек ============
@st.cache_resource
def get_config():
    return load_config()


def format_price(value: float) -> str:
    return f"{value:,.2f}"


def describe_rule(rule) -> str:
    if rule.discount_type == DiscountType.RATE:
        return f"{rule.value:g}%"
    return f"-{format_price(rule.value)}"


def default_quantity(product) -> int:
    return sum(qty for p, qty in DEFAULT_QUANTITIES if p is product)


# ============ Инициализация ============
st.set_page_config(
    page_title="Shopping Cart Pricing",
    page_icon="🛒",
    layout="wide",
)

config = get_config()

st.title("🛒 Корзина: скидки и доставка")
st.caption(
    f"🚚 Доставка: {config.cost_per_delivery:g} за категорию + "
    f"{config.cost_per_product:g} за товар + {config.fixed_cost:g}"
)

# ============ SIDEBAR - Количество товаров ============
with st.sidebar:
    st.header("📦 Товары")
    quantities = tuple(
        (
            p,
            st.number_input(
                f"{p.title} ({format_price(p.price)})",
                min_value=0,
                max_value=50,
                value=default_quantity(p),
                key=f"qty_{p.title}",
            ),
        )
        for p in PRODUCTS
    )

    st.divider()
    st.markdown("### 🎯 Кампании")
    for c in CAMPAIGNS:
        st.write(f"**{c.category.title}**: {describe_rule(c.rule)} от {c.rule.minimum:g} шт.")
    st.markdown("### 🎟️ Купон")
    st.write(f"{describe_rule(COUPON.rule)} при сумме от {format_price(COUPON.rule.minimum)}")

cart = build_sample_cart(config, quantities)
breakdown = cart_breakdown(cart)
summary = breakdown["summary"]

# ============ Итоги ============
if not cart.lines:
    st.info("🛍️ Корзина пуста. Укажите количество товаров слева!")
else:
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("💰 Сумма", format_price(summary["total_amount"]))
    with col2:
        st.metric("🎯 Кампании", format_price(summary["campaign_discount"]))
    with col3:
        st.metric("🎟️ Купон", format_price(summary["coupon_discount"]))
    with col4:
        st.metric("🚚 Доставка", format_price(summary["delivery_cost"]))

    st.markdown(
        f"### ✅ К оплате: **{format_price(summary['total_after_discounts'])}**"
    )

    st.divider()
    st.subheader("📋 Разбивка по товарам")
    st.dataframe(breakdown["lines"], use_container_width=True)

    with st.expander("🧾 Текстовый отчёт"):
        st.code(print_report(cart))
