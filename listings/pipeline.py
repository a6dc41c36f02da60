import logging
from typing import Iterable, List

from listings import settings
from listings.models import FilterOptions
from listings.utils import MISSING, as_text, coerce, is_number, render, resolve

logger = logging.getLogger(__name__)


def is_furnished(value) -> bool:
    # substring match: "unfurnished" counts as furnished too
    text = "" if value is None or value is MISSING else as_text(value).lower()
    return settings.FURNISHED_MARKER in text or text == settings.FURNISHED_EXACT


def under_price(value, max_price: float) -> bool:
    p = coerce(value)
    return is_number(p) and p < max_price


def to_line(price, area) -> str:
    return f"{render(coerce(price))} {render(coerce(area))}".strip()


def process(records: Iterable, options: FilterOptions) -> List[str]:
    """
    Filter raw records and turn each survivor into a "price area" line.

    Lines keep document order. A record with neither field still yields "".
    """
    out = []
    skipped_furnished = skipped_price = 0
    for rec in records:
        price = resolve(rec, settings.PRICE_ALIASES)
        area = resolve(rec, settings.AREA_ALIASES)
        furnishing = resolve(rec, settings.FURNISHING_ALIASES)

        if options.furnished and not is_furnished(furnishing):
            skipped_furnished += 1
            continue

        if options.price is not None and not under_price(price, options.price):
            skipped_price += 1
            continue

        out.append(to_line(price, area))

    logger.debug("[filter] kept %d; skipped %d by furnishing, %d by price",
                 len(out), skipped_furnished, skipped_price)
    return out
