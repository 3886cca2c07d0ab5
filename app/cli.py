"""
Консольная демонстрация: собирает корзину из примера и печатает отчёт.

    python -m app.cli
"""
import sys
import os
import logging

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.sample import build_sample_cart
from pricing.config import load_config
from Report_Service.report import print_report


def main() -> int:
    logging.basicConfig(
        level=os.getenv("CART_LOG_LEVEL", "WARNING"),
        format="%(levelname)s %(name)s: %(message)s",
    )
    cart = build_sample_cart(load_config())
    print(print_report(cart))
    return 0


if __name__ == "__main__":
    sys.exit(main())
