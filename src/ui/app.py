# src/ui/app.py

"""Terminal shop for the border_helper guide."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from src.config.settings import Settings
from src.filters.product_validator import ProductValidator
from src.filters.search_filter import SearchFilter
from src.models.cart import CartSummary
from src.models.catalog import DEMO_PRODUCTS
from src.models.product import Product
from src.services.cart_service import CartAggregator
from src.services.wishlist import Wishlist

logger = logging.getLogger("border_helper.ui")


def format_summary(summary: CartSummary) -> str:
    """One-line cart status shown under the product table."""
    return (
        f"🛒 {summary.total_items} item(s) | "
        f"Total ${summary.total_price:,.2f}"
    )


class ShopApp(App[object]):
    """Browse the catalog, search it and fill the session cart."""

    CSS_PATH = "styles.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_to_cart", "Add to cart"),
        Binding("plus", "increase", "+1"),
        Binding("minus", "decrease", "-1"),
        Binding("w", "toggle_wishlist", "Wishlist"),
        Binding("x", "clear_cart", "Clear cart"),
    ]

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        self.settings = Settings()
        catalog, dropped = ProductValidator.validate(
            list(DEMO_PRODUCTS if products is None else products)
        )
        if dropped:
            logger.warning("Dropped %d invalid catalog products", dropped)
        self.catalog: list[Product] = catalog
        self.search = SearchFilter.for_products()
        self.cart = CartAggregator(notifier=self._toast)
        self.wishlist = Wishlist()
        self.query_text: str = ""
        self.category: str = self.settings.ALL_CATEGORY
        self.visible: list[Product] = list(catalog)
        self._columns_ready = False

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        facets = self.search.derive_facet_list(self.catalog) or [
            self.settings.ALL_CATEGORY
        ]
        yield Header()
        yield Container(
            Static("🛍 Tachileik Shop", id="title"),
            Horizontal(
                Input(placeholder="Search products...", id="search_input"),
                Select(
                    [(facet, facet) for facet in facets],
                    value=self.settings.ALL_CATEGORY,
                    allow_blank=False,
                    id="category_select",
                ),
                id="search_bar",
            ),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            Static(format_summary(self.cart.get_summary()), id="cart_summary"),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the product table and hook the cart summary."""
        table = self._table()
        columns = table.add_columns(
            "", "Product", "Category", "Price", "Rating", "In cart"
        )
        self._wish_column = columns[0]
        self._qty_column = columns[-1]
        self._columns_ready = True
        self.cart.subscribe(self._on_cart_changed)
        self.populate_table()

    # ── Event handlers ───────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every keystroke in the search box."""
        if event.input.id == "search_input":
            self.query_text = event.value
            self.apply_filters()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Re-filter when a category chip is picked."""
        if event.select.id == "category_select" and isinstance(
            event.value, str
        ):
            self.category = event.value
            self.apply_filters()

    # ── Rendering ────────────────────────────────────────

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )

    def apply_filters(self) -> None:
        """Recompute the visible products from query and category."""
        self.visible = self.search.compose_filters(
            self.catalog, self.query_text, self.category
        )
        self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the visible products."""
        if not self._columns_ready:
            return
        table = self._table()
        table.clear()
        for p in self.visible:
            quantity = self.cart.quantity_of(p.id)
            table.add_row(
                "♥" if self.wishlist.contains(p.id) else "",
                p.name,
                p.category,
                Text(f"${p.price:,.2f}", style="bold green"),
                "⭐" * p.rating,
                str(quantity) if quantity else "",
                key=p.id,
            )

    def _selected_product(self) -> Product | None:
        if not self.visible:
            return None
        row = self._table().cursor_row
        if 0 <= row < len(self.visible):
            return self.visible[row]
        return None

    def _toast(self, message: str) -> None:
        self.notify(message, timeout=2)

    def _on_cart_changed(self, summary: CartSummary) -> None:
        self.query_one("#cart_summary", Static).update(
            format_summary(summary)
        )
        table = self._table()
        for p in self.visible:
            quantity = self.cart.quantity_of(p.id)
            table.update_cell(
                p.id, self._qty_column, str(quantity) if quantity else ""
            )

    # ── Actions ──────────────────────────────────────────

    def action_add_to_cart(self) -> None:
        """Add one unit of the highlighted product."""
        product = self._selected_product()
        if product is None:
            self.notify("No product selected", severity="warning")
            return
        self.cart.add_to_cart(product)

    def action_increase(self) -> None:
        """Raise the highlighted product's cart quantity by one."""
        product = self._selected_product()
        if product is None:
            return
        if self.cart.quantity_of(product.id):
            self.cart.increment(product.id)
        else:
            self.cart.add_to_cart(product)

    def action_decrease(self) -> None:
        """Lower the highlighted product's cart quantity by one."""
        product = self._selected_product()
        if product is not None:
            self.cart.decrement(product.id)

    def action_toggle_wishlist(self) -> None:
        """Flip the highlighted product's wishlist heart."""
        product = self._selected_product()
        if product is None:
            return
        added = self.wishlist.toggle(product.id)
        self._table().update_cell(
            product.id, self._wish_column, "♥" if added else ""
        )
        self.notify(
            f"{product.name} {'added to' if added else 'removed from'} wishlist"
        )

    def action_clear_cart(self) -> None:
        """Empty the cart."""
        if self.cart.is_empty:
            self.notify("Your cart is empty", severity="warning")
            return
        self.cart.clear_cart()
        self.notify("Cart cleared")
