# wpi/store.py
# --------------------------------------------------------------------------------------
# In-memory catalog (products, attribute terms, languages) implementing the
# ProductRepository / TermRepository / LanguageRegistry contracts.
# Snapshots are kept as JSON so a catalog fetched from WooCommerce can be reused.
# --------------------------------------------------------------------------------------
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from wpi.config import settings
from wpi.models import PRODUCT_TYPE_VARIATION, Language, Product, Term

logger = logging.getLogger("wpi")

ATTRIBUTE_TAXONOMY_PREFIX = "pa_"


def _norm(s: str | None) -> str:
    return "" if s is None else str(s).strip().lower()


class CatalogStore:
    def __init__(
        self,
        products: Iterable[Product] = (),
        terms: Iterable[Term] = (),
        languages: Iterable[Language] = (),
        translated_taxonomies: Iterable[str] | None = None,
    ):
        self.products: Dict[int, Product] = {}
        self.terms: Dict[int, Term] = {}
        self.languages: List[Language] = []
        if translated_taxonomies is None:
            translated_taxonomies = settings.WPI_TRANSLATED_TAXONOMIES
        # empty -> every pa_* taxonomy is translated
        self.translated_taxonomies = {t.strip() for t in translated_taxonomies if t and t.strip()}
        for p in products:
            self.add_product(p)
        for t in terms:
            self.add_term(t)
        for lang in languages:
            self.add_language(lang)

    # ---- Building ----

    def add_product(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    def add_term(self, term: Term) -> Term:
        self.terms[term.id] = term
        return term

    def add_language(self, language: Language) -> Language:
        self.languages = [lang for lang in self.languages if lang.slug != language.slug]
        self.languages.append(language)
        return language

    # ---- ProductRepository ----

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def get_default_attributes(self, product: Product) -> Dict[str, str]:
        return dict(product.default_attributes)

    def count_variation_children(self, product_id: int) -> int:
        return sum(
            1 for p in self.products.values()
            if p.parent_id == product_id and p.type == PRODUCT_TYPE_VARIATION
        )

    # ---- TermRepository ----

    def is_taxonomy_backed(self, key: str) -> bool:
        if self.translated_taxonomies:
            return key in self.translated_taxonomies
        return (key or "").startswith(ATTRIBUTE_TAXONOMY_PREFIX)

    def find_term(self, taxonomy: str, name: str) -> Optional[Term]:
        wanted = _norm(name)
        for term in self.terms.values():
            if term.taxonomy == taxonomy and _norm(term.name) == wanted:
                return term
        return None

    def get_term(self, term_id: int, taxonomy: str) -> Optional[Term]:
        term = self.terms.get(term_id)
        if term is None or term.taxonomy != taxonomy:
            return None
        return term

    def translate_term(self, term_id: int, lang: str) -> Optional[int]:
        term = self.terms.get(term_id)
        if term is None:
            return None
        if term.lang == lang:
            return term.id
        return term.translations.get(lang)

    def get_term_translations(self, term_id: int) -> Dict[str, int]:
        term = self.terms.get(term_id)
        if term is None:
            return {}
        out = dict(term.translations)
        if term.lang:
            out.setdefault(term.lang, term.id)
        return out

    def get_product_translations(self, product_id: int) -> Dict[str, int]:
        product = self.products.get(product_id)
        if product is None:
            return {}
        out = dict(product.translations)
        if product.lang:
            out.setdefault(product.lang, product.id)
        return out

    # ---- LanguageRegistry ----

    def get_languages(self) -> List[Language]:
        return list(self.languages)

    def default_language(self) -> Optional[str]:
        for lang in self.languages:
            if lang.is_default:
                return lang.slug
        return None

    # ---- Snapshots ----

    def to_dict(self) -> Dict[str, Any]:
        return {
            "products": [p.model_dump() for p in self.products.values()],
            "terms": [t.model_dump() for t in self.terms.values()],
            "languages": [lang.model_dump() for lang in self.languages],
            "translated_taxonomies": sorted(self.translated_taxonomies),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogStore":
        data = data or {}
        return cls(
            products=[Product(**p) for p in data.get("products") or []],
            terms=[Term(**t) for t in data.get("terms") or []],
            languages=[Language(**lang) for lang in data.get("languages") or []],
            translated_taxonomies=data.get("translated_taxonomies"),
        )


def load_snapshot(path: str | Path | None = None) -> CatalogStore:
    """Load a catalog snapshot; a missing or unreadable file gives an empty store."""
    path = Path(path or settings.WPI_SNAPSHOT_PATH)
    if not path.exists():
        return CatalogStore()
    try:
        return CatalogStore.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"[store] could not load snapshot '{path}': {e}")
        return CatalogStore()


def save_snapshot(store: CatalogStore, path: str | Path | None = None) -> Path:
    path = Path(path or settings.WPI_SNAPSHOT_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    logger.info(f"Saving catalog snapshot '{path}'")
    tmp.write_text(json.dumps(store.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path
