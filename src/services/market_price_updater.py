# src/services/market_price_updater.py

"""Copies marketplace listing details onto catalog market items."""

import logging
import re
from dataclasses import dataclass

from src.config.settings import Settings
from src.models.market_item import MarketItem

logger = logging.getLogger("market_catalog.services")

_NUMBER_RE = re.compile(r"\d[\d.,]*")


@dataclass
class MarketListing:
    """Product details as reported by the marketplace."""

    product_id: str
    price_and_currency: str
    title: str = ""
    description: str = ""
    currency_code: str = ""
    price_micros: int | None = None


def extract_price(text: str | None) -> float | None:
    """Extract a numeric price from a localized string like '$1,299.00'.

    Handles both ``1,299.00`` and ``1.299,00`` grouping.  Returns
    ``None`` when no number can be found.
    """
    if not text:
        return None
    match = _NUMBER_RE.search(text)
    if not match:
        return None

    raw = match.group(0).rstrip(".,")
    if "," in raw and "." in raw:
        decimal = "," if raw.rfind(",") > raw.rfind(".") else "."
        grouping = "." if decimal == "," else ","
        raw = raw.replace(grouping, "").replace(decimal, ".")
    elif "," in raw:
        head, _, tail = raw.rpartition(",")
        if len(tail) == 3:
            raw = raw.replace(",", "")
        else:
            raw = f"{head.replace(',', '')}.{tail}"
    elif raw.count(".") > 1:
        raw = raw.replace(".", "")

    try:
        return float(raw)
    except ValueError:
        return None


class MarketPriceUpdater:
    """Applies :class:`MarketListing` details to :class:`MarketItem` objects."""

    def __init__(self) -> None:
        self._micros_factor: int = Settings.PRICE_MICROS_FACTOR

    def apply(self, item: MarketItem, listing: MarketListing) -> bool:
        """Update *item* from *listing*.

        Returns whether the localized price string could be parsed; the
        same value is stored on ``item.price_successfully_parsed``.
        """
        item.market_price_and_currency = listing.price_and_currency
        item.market_title = listing.title
        item.market_description = listing.description
        item.market_currency_code = listing.currency_code

        parsed = extract_price(listing.price_and_currency)
        item.price_successfully_parsed = parsed is not None

        if listing.price_micros is not None:
            item.market_price_micros = listing.price_micros
        elif parsed is not None:
            item.market_price_micros = round(parsed * self._micros_factor)

        if parsed is None:
            logger.warning(
                "Could not parse market price '%s' for %s",
                listing.price_and_currency,
                item.product_id,
            )
        else:
            logger.debug(
                "Updated %s: %s (%d micros)",
                item.product_id,
                listing.price_and_currency,
                item.market_price_micros,
            )
        return item.price_successfully_parsed

    def apply_all(
        self,
        items: list[MarketItem],
        listings: list[MarketListing],
    ) -> int:
        """Apply each listing to every item with the same product id.

        Returns the number of items updated.  Listings without a matching
        item are logged and ignored; duplicate product ids are warned about.
        """
        by_id: dict[str, list[MarketItem]] = {}
        for item in items:
            if item.product_id is None:
                continue
            matches = by_id.setdefault(item.product_id, [])
            if matches:
                logger.warning(
                    "Duplicate catalog product id %s", item.product_id
                )
            matches.append(item)

        updated = 0
        for listing in listings:
            matches = by_id.get(listing.product_id, [])
            if not matches:
                logger.info(
                    "No catalog item for market product %s",
                    listing.product_id,
                )
                continue
            for item in matches:
                self.apply(item, listing)
            updated += len(matches)

        logger.info(
            "Updated %d items from %d market listings",
            updated,
            len(listings),
        )
        return updated
