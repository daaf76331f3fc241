# wpi/translations.py
# ---------------------------------------------------------
# Product / term translation lookups over a CatalogStore.
# ---------------------------------------------------------
from __future__ import annotations

from typing import Dict, Optional

from wpi.attributes import DefaultAttributeTranslations
from wpi.interfaces import LanguageRegistry
from wpi.models import Language, Product
from wpi.store import CatalogStore


def _drop_default(ids: Dict[str, int], languages: LanguageRegistry) -> Dict[str, int]:
    default = languages.default_language()
    return {lang: i for lang, i in ids.items() if lang != default}


def get_product_translations(
    store: CatalogStore, product_id: int, exclude_default: bool = False
) -> Dict[str, int]:
    """
    Translations of a product as { language slug: product ID },
    the product itself included.
    """
    ids = store.get_product_translations(product_id)
    return _drop_default(ids, store) if exclude_default else ids


def get_product_translation(store: CatalogStore, product_id: int, lang: str) -> Optional[Product]:
    """The product's translation in `lang`, or the product itself if it has none."""
    product = store.get_product(product_id)
    if product is None:
        return None
    translated_id = store.get_product_translations(product_id).get(lang)
    if translated_id:
        return store.get_product(translated_id) or product
    return product


def get_term_translations(
    store: CatalogStore, term_id: int, exclude_default: bool = False
) -> Dict[str, int]:
    ids = store.get_term_translations(term_id)
    return _drop_default(ids, store) if exclude_default else ids


def get_language(languages: LanguageRegistry, slug: str) -> Optional[Language]:
    for lang in languages.get_languages():
        if lang.slug == slug:
            return lang
    return None


def exclude_default_language(
    result: DefaultAttributeTranslations, languages: LanguageRegistry
) -> DefaultAttributeTranslations:
    """Copy of a resolver result without the default language's entry."""
    default = languages.default_language()
    return {lang: dict(attrs) for lang, attrs in result.items() if lang != default}
