# src/storage/catalog_store.py

"""Reads and writes the market item catalog as a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, cast

from src.config.settings import Settings
from src.models.market_item import MarketItem

logger = logging.getLogger("market_catalog.storage")


class CatalogStore:
    """Persists a list of :class:`MarketItem` to a single JSON file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path if path is not None else Settings.CATALOG_PATH
        logger.debug("CatalogStore initialised, path=%s", self.path)

    def save(self, items: list[MarketItem]) -> Path:
        """Write *items* as a JSON array and return the file path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [item.to_json_object().to_dict() for item in items]

        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info("Saved %d market items to %s", len(items), self.path)
        return self.path

    def load(self) -> tuple[list[MarketItem], int]:
        """Load the catalog.

        Returns the items read and the count of entries skipped because
        they were not objects or could not be deserialized.  A missing or
        unreadable file yields an empty catalog.
        """
        if not self.path.exists():
            logger.info("No catalog at %s", self.path)
            return [], 0

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Failed to read %s: %s", self.path, exc)
            return [], 0

        if not isinstance(data, list):
            logger.warning(
                "Catalog %s is not a JSON array, ignoring", self.path
            )
            return [], 0

        items: list[MarketItem] = []
        skipped = 0
        for entry in cast(list[Any], data):
            if not isinstance(entry, dict):
                skipped += 1
                continue
            try:
                items.append(
                    MarketItem.from_json(cast(dict[str, Any], entry))
                )
            except (KeyError, TypeError, ValueError, OverflowError) as exc:
                logger.warning("Skipping market item entry: %s", exc)
                skipped += 1

        if skipped:
            logger.info("Skipped %d invalid catalog entries", skipped)
        logger.info("Loaded %d market items from %s", len(items), self.path)
        return items, skipped
