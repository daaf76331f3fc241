# wpi/interfaces.py
"""
Read-only collaborator contracts the translation helpers depend on.
The host (or wpi.store.CatalogStore) supplies the implementations.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from wpi.models import Language, Product, Term


class ProductRepository(Protocol):
    def get_product(self, product_id: int) -> Optional[Product]: ...

    def get_default_attributes(self, product: Product) -> Dict[str, str]: ...

    def count_variation_children(self, product_id: int) -> int: ...


class TermRepository(Protocol):
    def is_taxonomy_backed(self, key: str) -> bool: ...

    def find_term(self, taxonomy: str, name: str) -> Optional[Term]: ...

    def get_term(self, term_id: int, taxonomy: str) -> Optional[Term]: ...

    def translate_term(self, term_id: int, lang: str) -> Optional[int]: ...


class LanguageRegistry(Protocol):
    def get_languages(self) -> List[Language]: ...

    def default_language(self) -> Optional[str]: ...


class CatalogReader(ProductRepository, TermRepository, LanguageRegistry, Protocol):
    """A single store providing products, terms and languages."""
