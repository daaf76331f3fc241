# wpi/variations.py
# --------------------------------------------------------------------------------------
# Variable product state during the "add translation" workflow.
#
# Polylang duplicates a variable product as a bare simple post first; the product is
# only promoted to "variable" once its variations have been copied. In between, the
# draft looks simple but already owns variation children.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Optional, Union

from wpi.interfaces import ProductRepository
from wpi.models import Product, RequestContext

logger = logging.getLogger("wpi")

ProductRef = Union[Product, int, str]


class VariableProductStateDetector:
    def __init__(self, products: ProductRepository):
        self.products = products

    def _load(self, product: Optional[ProductRef]) -> Optional[Product]:
        if isinstance(product, Product):
            return product
        if isinstance(product, bool) or product is None:
            return None
        if isinstance(product, str):
            product = product.strip()
            if not product.lstrip("+-").isdigit():
                return None
        try:
            return self.products.get_product(abs(int(product)))
        except (TypeError, ValueError):
            return None

    def is_pending_variable_product(
        self, product: Optional[ProductRef], context: Optional[RequestContext]
    ) -> bool:
        """
        True when a simple product is really a variable product mid-duplication:
        add-new product screen, Polylang translation request (from_post + new_lang)
        and at least one variation child already attached.
        """
        product = self._load(product)
        if product is None or context is None or not product.is_simple:
            return False
        if not (context.is_add_new_product and context.is_translation_request):
            return False
        has_variations = self.products.count_variation_children(product.id) > 0
        if has_variations:
            logger.debug(f"[variations] product {product.id} is a pending variable product")
        return has_variations

    def maybe_variable_product(
        self, product: Optional[ProductRef], context: Optional[RequestContext]
    ) -> bool:
        """True for variable products and for simple drafts pending promotion."""
        loaded = self._load(product)
        if loaded is None:
            return False
        if loaded.is_variable:
            return True
        return self.is_pending_variable_product(loaded, context)


def is_pending_variable_product(
    store: ProductRepository, product: Optional[ProductRef], context: Optional[RequestContext]
) -> bool:
    return VariableProductStateDetector(store).is_pending_variable_product(product, context)


def maybe_variable_product(
    store: ProductRepository, product: Optional[ProductRef], context: Optional[RequestContext]
) -> bool:
    return VariableProductStateDetector(store).maybe_variable_product(product, context)
