# tests/test_market_price_updater.py

"""Tests for applying marketplace listings to market items."""

import unittest

from src.models.market_item import Managed, MarketItem
from src.services.market_price_updater import (
    MarketListing,
    MarketPriceUpdater,
    extract_price,
)


class TestExtractPrice(unittest.TestCase):
    """extract_price localized string parsing."""

    def test_known_formats(self) -> None:
        """Common marketplace price strings are parsed."""
        cases = {
            "$0.99": 0.99,
            "€1,99": 1.99,
            "1,299.00 AED": 1299.0,
            "1.299,00 €": 1299.0,
            "¥1,200": 1200.0,
            "US$ 4.99.": 4.99,
            "1.234.567": 1234567.0,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(extract_price(text), expected)

    def test_no_number(self) -> None:
        """Strings without digits yield None."""
        self.assertIsNone(extract_price("Free"))

    def test_empty(self) -> None:
        """Empty or None input yields None."""
        self.assertIsNone(extract_price(""))
        self.assertIsNone(extract_price(None))


class TestMarketPriceUpdater(unittest.TestCase):
    """MarketPriceUpdater.apply / apply_all behaviour."""

    def setUp(self) -> None:
        self.updater = MarketPriceUpdater()
        self.item = MarketItem("com.app.sword", Managed.MANAGED, 1.99)

    def test_apply_copies_listing(self) -> None:
        """Every listing field lands on the item."""
        listing = MarketListing(
            product_id="com.app.sword",
            price_and_currency="$1.99",
            title="Sword",
            description="A sharp sword",
            currency_code="USD",
            price_micros=1990000,
        )
        self.assertTrue(self.updater.apply(self.item, listing))
        self.assertEqual(self.item.market_price_and_currency, "$1.99")
        self.assertEqual(self.item.market_title, "Sword")
        self.assertEqual(self.item.market_description, "A sharp sword")
        self.assertEqual(self.item.market_currency_code, "USD")
        self.assertEqual(self.item.market_price_micros, 1990000)
        self.assertTrue(self.item.price_successfully_parsed)

    def test_apply_derives_micros(self) -> None:
        """Micros are computed from the parsed price when not reported."""
        listing = MarketListing("com.app.sword", "€2,49")
        self.updater.apply(self.item, listing)
        self.assertEqual(self.item.market_price_micros, 2490000)

    def test_apply_unparseable_price(self) -> None:
        """An unparseable price clears the parsed flag and warns."""
        self.item.price_successfully_parsed = True
        with self.assertLogs("market_catalog.services", level="WARNING"):
            result = self.updater.apply(
                self.item, MarketListing("com.app.sword", "Free")
            )
        self.assertFalse(result)
        self.assertFalse(self.item.price_successfully_parsed)
        self.assertEqual(self.item.market_price_micros, 0)
        self.assertEqual(self.item.market_price_and_currency, "Free")

    def test_apply_does_not_touch_reference_price(self) -> None:
        """The app's own price is left alone."""
        self.updater.apply(self.item, MarketListing("com.app.sword", "$5.00"))
        self.assertEqual(self.item.price, 1.99)

    def test_apply_all_matches_by_product_id(self) -> None:
        """Only listings with a matching item are applied."""
        shield = MarketItem("com.app.shield", Managed.UNMANAGED, 0.99)
        orphan = MarketItem(None, Managed.UNMANAGED, 0.5)
        listings = [
            MarketListing("com.app.shield", "$0.99", title="Shield"),
            MarketListing("com.app.unknown", "$9.99"),
        ]
        updated = self.updater.apply_all(
            [self.item, shield, orphan], listings
        )
        self.assertEqual(updated, 1)
        self.assertEqual(shield.market_title, "Shield")
        self.assertIsNone(self.item.market_title)
        self.assertIsNone(orphan.market_title)

    def test_apply_all_duplicate_product_ids(self) -> None:
        """Every item sharing a product id is updated, with a warning."""
        twin = MarketItem("com.app.sword", Managed.MANAGED, 1.99)
        with self.assertLogs("market_catalog.services", level="WARNING") as cm:
            updated = self.updater.apply_all(
                [self.item, twin],
                [MarketListing("com.app.sword", "$1.99", title="Sword")],
            )
        self.assertEqual(updated, 2)
        self.assertEqual(self.item.market_title, "Sword")
        self.assertEqual(twin.market_title, "Sword")
        self.assertTrue(
            any("Duplicate catalog product id" in line for line in cm.output)
        )

    def test_apply_all_empty(self) -> None:
        """No listings means no updates."""
        self.assertEqual(self.updater.apply_all([self.item], []), 0)


if __name__ == "__main__":
    unittest.main()
