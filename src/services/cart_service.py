# src/services/cart_service.py

"""Session cart: product quantities and derived totals."""

import logging
from collections.abc import Callable

from src.models.cart import CartLine, CartSummary
from src.models.product import Product

logger = logging.getLogger("border_helper.cart")

Notifier = Callable[[str], None]
SummaryListener = Callable[[CartSummary], None]


class CartAggregator:
    """Owns the mapping from product id to cart line.

    The aggregator is built by whoever owns the session (the TUI app,
    a test) and handed to its consumers; there is no shared instance.
    Every mutation returns the fresh :class:`CartSummary` and pushes it
    to subscribers once the mutation has fully applied.

    Quantities below 1 are never stored: setting a line to zero or a
    negative value removes it.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._lines: dict[str, CartLine] = {}
        self._notifier = notifier
        self._listeners: list[SummaryListener] = []

    # ── Queries ──────────────────────────────────────────

    @property
    def lines(self) -> list[CartLine]:
        """Current lines in the order products were first added."""
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, product_id: str) -> int:
        """Return the quantity held for *product_id*, or 0."""
        line = self._lines.get(product_id)
        return line.quantity if line else 0

    def get_summary(self) -> CartSummary:
        """Fold the current lines into item and price totals."""
        total_items = 0
        total_price = 0.0
        for line in self._lines.values():
            total_items += line.quantity
            total_price += line.subtotal
        return CartSummary(
            total_items=total_items, total_price=total_price
        )

    # ── Commands ─────────────────────────────────────────

    def add_to_cart(self, product: Product) -> CartSummary:
        """Add one unit of *product*, creating its line if needed."""
        existing = self._lines.get(product.id)
        if existing is not None:
            self._lines[product.id] = CartLine(
                product=existing.product,
                quantity=existing.quantity + 1,
            )
        else:
            self._lines[product.id] = CartLine(
                product=product, quantity=1
            )
        logger.debug(
            "Added %s (id=%s), quantity now %d",
            product.name,
            product.id,
            self._lines[product.id].quantity,
        )
        if self._notifier is not None:
            self._notifier(f"{product.name} added to cart")
        return self._publish()

    def update_cart_item_quantity(
        self, product_id: str, quantity: int
    ) -> CartSummary:
        """Set the quantity of an existing line.

        ``quantity <= 0`` removes the line.  Unknown ids are ignored;
        this never creates a line.
        """
        if quantity <= 0:
            if self._lines.pop(product_id, None) is not None:
                logger.debug("Removed line for id=%s", product_id)
            return self._publish()

        existing = self._lines.get(product_id)
        if existing is None:
            logger.debug(
                "Quantity update for id=%s ignored: not in cart",
                product_id,
            )
            return self._publish()

        self._lines[product_id] = CartLine(
            product=existing.product, quantity=quantity
        )
        logger.debug(
            "Set quantity for id=%s to %d", product_id, quantity
        )
        return self._publish()

    def increment(self, product_id: str) -> CartSummary:
        """Cart screen "+" button."""
        return self.update_cart_item_quantity(
            product_id, self.quantity_of(product_id) + 1
        )

    def decrement(self, product_id: str) -> CartSummary:
        """Cart screen "-" button; dropping to zero removes the line."""
        if product_id not in self._lines:
            return self.get_summary()
        return self.update_cart_item_quantity(
            product_id, self.quantity_of(product_id) - 1
        )

    def clear_cart(self) -> CartSummary:
        """Remove every line."""
        removed = len(self._lines)
        self._lines.clear()
        logger.debug("Cart cleared (%d lines removed)", removed)
        return self._publish()

    # ── Subscriptions ────────────────────────────────────

    def subscribe(
        self, listener: SummaryListener
    ) -> Callable[[], None]:
        """Register *listener* for summaries after each mutation.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> CartSummary:
        summary = self.get_summary()
        for listener in list(self._listeners):
            listener(summary)
        return summary
