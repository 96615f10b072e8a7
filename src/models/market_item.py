# src/models/market_item.py

"""Marketplace catalog entry used for purchases made through the market."""

import logging
import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.config.store_json_consts import StoreJSONConsts
from src.models.json_object import JSONObject, MissingFieldError

logger = logging.getLogger("market_catalog.models")


class Managed(Enum):
    """Purchase lifecycle category of a market product.

    ``MANAGED`` products are bought once per user; the market remembers
    the purchase and it can be restored after a reinstall (a new level).
    ``UNMANAGED`` products can be used up and bought again (gold coins);
    the application keeps track of them.  ``SUBSCRIPTION`` works like
    ``MANAGED`` but the user is charged periodically.
    """

    MANAGED = 0
    UNMANAGED = 1
    SUBSCRIPTION = 2


def _narrow_to_single(value: float) -> float:
    """Round *value* to single (32-bit) float precision.

    Values beyond the 32-bit range saturate to signed infinity.
    """
    try:
        single: float = struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)
    return float(f"{single:.7g}")


@dataclass
class MarketItem:
    """A product as listed in the marketplace catalog.

    Only ``product_id``, ``managed`` and ``price`` are required.  The
    ``market_*`` fields are filled in later from the marketplace's own
    listing, and ``price_successfully_parsed`` records whether the
    localized price string could be turned into a number.
    """

    product_id: str | None
    managed: Managed
    price: float
    market_price_and_currency: str | None = None
    market_title: str | None = None
    market_description: str | None = None
    market_currency_code: str | None = None
    market_price_micros: int = 0
    price_successfully_parsed: bool = False

    @classmethod
    def from_json(
        cls,
        json_object: JSONObject | dict[str, Any],
        log: logging.Logger | None = None,
    ) -> "MarketItem":
        """Build an item from its JSON representation.

        A missing ``productId`` is logged and left unset.  A missing
        ``managed`` flag means ``UNMANAGED``; any flag other than 0 does
        too, so ``SUBSCRIPTION`` is never produced here.

        Raises:
            MissingFieldError: If the ``price`` field is absent.
        """
        log = log or logger
        if isinstance(json_object, dict):
            json_object = JSONObject(json_object)

        managed = Managed.UNMANAGED
        if json_object.has_field(StoreJSONConsts.MARKETITEM_MANAGED):
            # null reads as 0
            is_managed = int(
                json_object.opt_number(StoreJSONConsts.MARKETITEM_MANAGED)
            )
            log.debug("Market item managed flag: %d", is_managed)
            if is_managed == 0:
                managed = Managed.MANAGED

        product_id: str | None = None
        if json_object.has_field(StoreJSONConsts.MARKETITEM_PRODUCT_ID):
            product_id = json_object.get_str(
                StoreJSONConsts.MARKETITEM_PRODUCT_ID
            )
        else:
            log.error("Market Item No Product ID")

        price = json_object.get_number(StoreJSONConsts.MARKETITEM_PRICE)

        return cls(
            product_id=product_id,
            managed=managed,
            price=price,
            market_price_and_currency=json_object.opt_str(
                StoreJSONConsts.MARKETITEM_MARKETPRICE
            ),
            market_title=json_object.opt_str(
                StoreJSONConsts.MARKETITEM_MARKETTITLE
            ),
            market_description=json_object.opt_str(
                StoreJSONConsts.MARKETITEM_MARKETDESC
            ),
            market_currency_code=json_object.opt_str(
                StoreJSONConsts.MARKETITEM_MARKETCURRENCYCODE
            ),
            market_price_micros=json_object.opt_int(
                StoreJSONConsts.MARKETITEM_MARKETPRICEMICROS
            ),
        )

    @classmethod
    def try_from_json(
        cls,
        json_object: JSONObject | dict[str, Any],
        log: logging.Logger | None = None,
    ) -> "MarketItemParseResult":
        """Like :meth:`from_json`, but return a missing price as a result."""
        try:
            return MarketItemParseResult(
                item=cls.from_json(json_object, log)
            )
        except MissingFieldError as exc:
            return MarketItemParseResult(error=exc)

    def to_json_object(
        self, log: logging.Logger | None = None
    ) -> JSONObject:
        """Serialize the item; never raises.

        No ``managed`` field is written for ``SUBSCRIPTION`` items.  If a
        field cannot be serialized the error is logged and the object
        built so far is returned.
        """
        log = log or logger
        json_object = JSONObject()

        try:
            if self.managed == Managed.MANAGED:
                json_object.add_field(StoreJSONConsts.MARKETITEM_MANAGED, 0)
            if self.managed == Managed.UNMANAGED:
                json_object.add_field(StoreJSONConsts.MARKETITEM_MANAGED, 1)
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_PRODUCT_ID, self.product_id
            )
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_PRICE,
                _narrow_to_single(self.price),
            )

            json_object.add_field(
                StoreJSONConsts.MARKETITEM_MARKETPRICE,
                self.market_price_and_currency,
            )
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_MARKETTITLE, self.market_title
            )
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_MARKETDESC,
                self.market_description,
            )
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_MARKETCURRENCYCODE,
                self.market_currency_code,
            )
            json_object.add_field(
                StoreJSONConsts.MARKETITEM_MARKETPRICEMICROS,
                int(self.market_price_micros),
            )
        except Exception as exc:
            log.error(
                "An error occurred while generating JSON object. %s",
                exc,
                exc_info=True,
            )

        return json_object


@dataclass
class MarketItemParseResult:
    """Outcome of :meth:`MarketItem.try_from_json`."""

    item: MarketItem | None = None
    error: MissingFieldError | None = None

    @property
    def ok(self) -> bool:
        """``True`` when an item was built."""
        return self.item is not None
