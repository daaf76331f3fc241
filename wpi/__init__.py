"""Default-attribute translation helpers for multilingual WooCommerce catalogs."""

from wpi.attributes import (
    AttributeTranslationResolver,
    LocalNode,
    TaxonomyNode,
    resolve_default_attribute_translations,
)
from wpi.models import Language, Product, RequestContext, Term
from wpi.store import CatalogStore
from wpi.variations import (
    VariableProductStateDetector,
    is_pending_variable_product,
    maybe_variable_product,
)

__all__ = [
    "AttributeTranslationResolver",
    "CatalogStore",
    "Language",
    "LocalNode",
    "Product",
    "RequestContext",
    "TaxonomyNode",
    "Term",
    "VariableProductStateDetector",
    "is_pending_variable_product",
    "maybe_variable_product",
    "resolve_default_attribute_translations",
]
