# src/services/wishlist.py

"""In-session wishlist of product ids."""

import logging

logger = logging.getLogger("border_helper.wishlist")


class Wishlist:
    """Ordered set of wishlisted product ids."""

    def __init__(self) -> None:
        self._ids: dict[str, None] = {}

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    def contains(self, product_id: str) -> bool:
        return product_id in self._ids

    def toggle(self, product_id: str) -> bool:
        """Flip membership of *product_id* and return the new state."""
        if product_id in self._ids:
            del self._ids[product_id]
            logger.debug("Removed %s from wishlist", product_id)
            return False
        self._ids[product_id] = None
        logger.debug("Added %s to wishlist", product_id)
        return True
