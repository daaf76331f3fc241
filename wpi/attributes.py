# wpi/attributes.py
# --------------------------------------------------------------------------------------
# Translation of a variable product's default attributes into every catalog language.
# Global attributes (pa_* taxonomies) carry per-language terms and are translated
# through the term translation index; local attributes are plain strings and are
# copied as-is into each language.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from wpi.interfaces import CatalogReader, LanguageRegistry, ProductRepository, TermRepository

logger = logging.getLogger("wpi")

# { "fr": { "pa_color": "rouge", "engraving": "None" }, ... }
DefaultAttributeTranslations = Dict[str, Dict[str, str]]


@dataclass(frozen=True)
class TaxonomyNode:
    term_id: int
    taxonomy: str


@dataclass(frozen=True)
class LocalNode:
    key: str
    value: str


AttributeNode = Union[TaxonomyNode, LocalNode]


class AttributeTranslationResolver:
    """
    Resolve a variable product's default attributes for one or all languages.

    Returns {} when the product does not exist, is not variable, or has no
    default attributes. Otherwise every requested language is present in the
    result, even when its attribute map ends up empty.
    """

    def __init__(
        self,
        products: ProductRepository,
        terms: TermRepository,
        languages: LanguageRegistry,
    ):
        self.products = products
        self.terms = terms
        self.languages = languages

    def classify(self, default_attributes: Dict[str, str]) -> List[AttributeNode]:
        nodes: List[AttributeNode] = []
        for key, value in default_attributes.items():
            if not self.terms.is_taxonomy_backed(key):
                nodes.append(LocalNode(key=key, value=value))
                continue
            term = self.terms.find_term(key, value)
            if term is None:
                logger.debug(f"[attributes] no '{key}' term named '{value}', skipping")
                continue
            nodes.append(TaxonomyNode(term_id=term.id, taxonomy=term.taxonomy))
        return nodes

    def translate_nodes(self, nodes: List[AttributeNode], lang: str) -> Dict[str, str]:
        translated: Dict[str, str] = {}
        for node in nodes:
            if isinstance(node, LocalNode):
                translated[node.key] = node.value
                continue
            term_id = self.terms.translate_term(node.term_id, lang)
            term = self.terms.get_term(term_id, node.taxonomy) if term_id else None
            if term is None:
                logger.debug(
                    f"[attributes] term {node.term_id} ({node.taxonomy}) has no '{lang}' translation"
                )
                continue
            translated[term.taxonomy] = term.slug
        return translated

    def resolve(self, product_id: int, lang: Optional[str] = None) -> DefaultAttributeTranslations:
        product = self.products.get_product(product_id)
        if product is None or not product.is_variable:
            return {}

        default_attributes = self.products.get_default_attributes(product)
        if not default_attributes:
            return {}

        nodes = self.classify(default_attributes)
        if lang:
            langs = [lang]
        else:
            langs = [language.slug for language in self.languages.get_languages()]

        return {code: self.translate_nodes(nodes, code) for code in langs}


def resolve_default_attribute_translations(
    store: CatalogReader, product_id: int, lang: Optional[str] = None
) -> DefaultAttributeTranslations:
    """Shortcut for a store implementing all three collaborator contracts."""
    return AttributeTranslationResolver(store, store, store).resolve(product_id, lang)
