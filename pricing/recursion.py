import logging
from typing import Optional, Tuple
from .domain import Category

logger = logging.getLogger(__name__)


def is_ancestor(candidate: Category, node: Optional[Category]) -> bool:
    """
    Является ли candidate предком node (строго выше по цепочке parent).
    Повтор категории в цепочке означает цикл: обход прекращается.
    """
    if node is None:
        return False

    seen = {id(node)}
    current = node.parent
    while current is not None:
        if current is candidate:
            return True
        if id(current) in seen:
            logger.warning("Цикл в иерархии категорий у '%s'", node.title)
            return False
        seen.add(id(current))
        current = current.parent
    return False


def in_scope(category: Category, product_category: Category) -> bool:
    """Товар попадает в кампанию категории, если его категория равна ей или вложена в неё"""
    return product_category is category or is_ancestor(category, product_category)


def ancestry(category: Optional[Category], _seen: Tuple[int, ...] = ()) -> Tuple[Category, ...]:
    """
    Рекурсивно возвращает категорию и всех её предков (корень последним)

    Пример:
      Phone -> SmartPhone
      ancestry(SmartPhone) -> (SmartPhone, Phone)
    """
    if category is None or id(category) in _seen:
        return ()
    return (category,) + ancestry(category.parent, _seen + (id(category),))
