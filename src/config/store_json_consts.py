# src/config/store_json_consts.py

"""JSON keys used when persisting store metadata."""


class StoreJSONConsts:
    """Key constants for the serialized form of a market item."""

    MARKETITEM_MANAGED: str = "managed"
    MARKETITEM_PRODUCT_ID: str = "productId"
    MARKETITEM_PRICE: str = "price"
    MARKETITEM_MARKETPRICE: str = "marketPrice"
    MARKETITEM_MARKETTITLE: str = "marketTitle"
    MARKETITEM_MARKETDESC: str = "marketDesc"
    MARKETITEM_MARKETCURRENCYCODE: str = "marketCurrencyCode"
    MARKETITEM_MARKETPRICEMICROS: str = "marketPriceMicros"
