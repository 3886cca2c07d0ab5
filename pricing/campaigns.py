import logging
from functools import reduce
from typing import Dict, Iterable, Tuple
from .domain import Campaign, CartLine, Category, Product
from .recursion import in_scope
from .strategies import strategy_for, subtotal, total_quantity

logger = logging.getLogger(__name__)


def group_by_category(
    campaigns: Iterable[Campaign],
) -> Dict[Category, Tuple[Campaign, ...]]:
    """Группирует кампании по категории, сохраняя порядок первого появления"""

    def add_campaign(acc: dict, campaign: Campaign) -> dict:
        if campaign is None:
            return acc
        return {**acc, campaign.category: acc.get(campaign.category, ()) + (campaign,)}

    return reduce(add_campaign, campaigns or (), {})


def lines_in_scope(
    lines: Tuple[CartLine, ...], category: Category
) -> Tuple[CartLine, ...]:
    """Строки корзины, чья категория равна category или вложена в неё"""
    return tuple(filter(lambda line: in_scope(category, line.product.category), lines))


def select_discount(
    scope: Tuple[CartLine, ...], campaigns: Tuple[Campaign, ...]
) -> float:
    """
    Лучшая скидка среди конкурирующих кампаний одной категории.
    Кампании не суммируются: остаётся наибольшее значение.
    Кампания, чей минимум по количеству не набран, пропускается.
    """
    quantity = total_quantity(scope)

    def apply_campaign(current: float, campaign: Campaign) -> float:
        if quantity < campaign.rule.minimum:
            logger.debug(
                "Кампания %s для '%s' пропущена: %s < %s",
                campaign.rule.discount_type.value,
                campaign.category.title,
                quantity,
                campaign.rule.minimum,
            )
            return current
        return strategy_for(campaign.rule).campaign(scope, campaign.rule, current)

    return reduce(apply_campaign, campaigns, 0.0)


def allocate(
    lines: Tuple[CartLine, ...], basis: float, discount: float
) -> Dict[Product, float]:
    """Распределяет скидку по товарам пропорционально их сумме (с округлением до копеек)"""
    if basis == 0:
        return {line.product: 0.0 for line in lines}
    return {
        line.product: round(line.subtotal() / basis * discount, 2) for line in lines
    }


def calculate_campaign_discounts(
    lines: Tuple[CartLine, ...], campaigns: Iterable[Campaign]
) -> Dict[Product, float]:
    """
    Скидки кампаний по товарам.
    Для каждой категории выбирается лучшая кампания, её скидка распределяется
    по товарам категории. Скидки разных категорий на один товар складываются.
    """
    groups = group_by_category(campaigns)

    def accumulate(acc: dict, group: Tuple[Category, Tuple[Campaign, ...]]) -> dict:
        category, group_campaigns = group
        scope = lines_in_scope(lines, category)
        if not scope:
            logger.debug("Нет товаров категории '%s' в корзине", category.title)
            return acc

        discount = select_discount(scope, group_campaigns)
        if discount <= 0:
            return acc

        logger.info("Скидка кампании для '%s': %.2f", category.title, discount)
        allocated = allocate(scope, subtotal(scope), discount)
        return {
            **acc,
            **{
                product: round(acc.get(product, 0.0) + value, 2)
                for product, value in allocated.items()
            },
        }

    return reduce(accumulate, groups.items(), {})
