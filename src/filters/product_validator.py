# src/filters/product_validator.py

"""Product validation: drop malformed catalog records before use."""

import logging

from src.models.product import Product

logger = logging.getLogger("border_helper.filters")

MIN_RATING = 0
MAX_RATING = 5


class ProductValidator:
    """Validate products and drop those that break the catalog contract."""

    @staticmethod
    def validate(
        products: list[Product],
    ) -> tuple[list[Product], int]:
        """Drop products with blank id/name, negative price or bad rating.

        Returns the valid products and the count of dropped items.
        """
        valid: list[Product] = []
        dropped = 0

        for product in products:
            if not product.id.strip() or not product.name.strip():
                logger.debug(
                    "Dropped product with empty id/name (id=%r)",
                    product.id,
                )
                dropped += 1
                continue
            if product.price < 0:
                logger.debug(
                    "Dropped product with negative price "
                    "(id=%s, price=%s)",
                    product.id,
                    product.price,
                )
                dropped += 1
                continue
            if not MIN_RATING <= product.rating <= MAX_RATING:
                logger.debug(
                    "Dropped product with out-of-range rating "
                    "(id=%s, rating=%s)",
                    product.id,
                    product.rating,
                )
                dropped += 1
                continue
            valid.append(product)

        if dropped:
            logger.info(
                "Validation dropped %d invalid products",
                dropped,
            )

        return valid, dropped
