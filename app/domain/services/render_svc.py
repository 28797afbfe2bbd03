# app/domain/services/render_svc.py

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from app.domain.models.product import Product

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

PAGE_TEMPLATE = "page.html"
TABLE_TEMPLATE = "products_table.html"


def format_price(value: float) -> str:
    """
    Fixed-point, two decimals, no currency handling.
    Rounds the float's exact binary value half-to-even: 19.999 -> 20.00, 2.005 -> 2.00.
    """
    return format(float(value), ".2f")


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        auto_reload=False,
    )
    env.filters["price"] = format_price
    return env


class PageRenderer:
    """
    Renders the product list as a full page or as the table fragment alone.
    Both templates come from one environment and are compiled at construction.
    """

    def __init__(self, env: Environment | None = None):
        self.env = env or build_environment()
        self._page = self.env.get_template(PAGE_TEMPLATE)
        self._table = self.env.get_template(TABLE_TEMPLATE)

    def render_fragment(self, products: Sequence[Product]) -> str:
        return self._table.render(products=products)

    def render_full_page(self, products: Sequence[Product]) -> str:
        # the page embeds the exact fragment output so a reload swaps in identical markup
        table = Markup(self.render_fragment(products))
        return self._page.render(table=table)


@lru_cache
def get_renderer() -> PageRenderer:
    """Process-wide renderer; never mutated after construction."""
    return PageRenderer()
