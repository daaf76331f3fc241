#==========================================================================================
# wpi/woocommerce.py
# WooCommerce / Polylang REST interface.
# Reads products, variations, global attributes, attribute terms and languages, and
# builds a CatalogStore snapshot for a product and its translations.
#==========================================================================================
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional

import httpx

from wpi.config import settings
from wpi.models import PRODUCT_TYPE_VARIATION, Language, Product, Term
from wpi.store import CatalogStore

logger = logging.getLogger("wpi")

PER_PAGE = 100


def _url(path: str) -> str:
    return f"{settings.WC_BASE_URL}{path}"


def _auth() -> tuple[str, str]:
    return (settings.WC_API_KEY, settings.WC_API_SECRET)


@asynccontextmanager
async def _wc_client(client: Optional[httpx.AsyncClient] = None) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.WC_HTTP_TIMEOUT, verify=settings.WC_VERIFY_SSL) as c:
        yield c


async def _get_json(client: httpx.AsyncClient, path: str, params: Dict[str, Any] | None = None):
    try:
        resp = await client.get(_url(path), auth=_auth(), params=params)
    except httpx.HTTPError as e:
        logger.error(f"[WC] GET {path} error: {e}")
        return None
    if resp.status_code != 200:
        logger.warning(f"[WC] GET {path} returned {resp.status_code}")
        return None
    try:
        return resp.json()
    except ValueError:
        logger.error(f"[WC] GET {path} returned a non-JSON body")
        return None


async def _get_paginated(client: httpx.AsyncClient, path: str) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    page = 1
    while True:
        batch = await _get_json(client, path, {"per_page": PER_PAGE, "page": page})
        if not isinstance(batch, list) or not batch:
            break
        rows.extend(batch)
        if len(batch) < PER_PAGE:
            break
        page += 1
    return rows


# ---- Products ----

async def get_wc_product(product_id: int, client: Optional[httpx.AsyncClient] = None):
    """Fetch a single WooCommerce product, None if it cannot be read."""
    async with _wc_client(client) as c:
        data = await _get_json(c, f"/wp-json/wc/v3/products/{int(product_id)}")
    return data if isinstance(data, dict) else None


async def get_wc_variations(parent_id: int, client: Optional[httpx.AsyncClient] = None):
    """All variations of a variable product (paginated)."""
    async with _wc_client(client) as c:
        return await _get_paginated(c, f"/wp-json/wc/v3/products/{int(parent_id)}/variations")


# ---- Attributes ----

async def get_wc_attributes(client: Optional[httpx.AsyncClient] = None):
    """
    Global product attributes. The endpoint returns every attribute in one
    response and ignores per_page/page.
    Endpoint: /wp-json/wc/v3/products/attributes
    """
    async with _wc_client(client) as c:
        data = await _get_json(c, "/wp-json/wc/v3/products/attributes")
    return [a for a in data if isinstance(a, dict)] if isinstance(data, list) else []


async def get_wc_attribute_terms(attribute_id: int, client: Optional[httpx.AsyncClient] = None):
    """
    Terms of a global attribute, with Polylang's lang/translations fields.
    Endpoint: /wp-json/wc/v3/products/attributes/{id}/terms
    """
    async with _wc_client(client) as c:
        return await _get_paginated(c, f"/wp-json/wc/v3/products/attributes/{int(attribute_id)}/terms")


# ---- Languages ----

async def get_pll_languages(client: Optional[httpx.AsyncClient] = None):
    """Polylang languages. Endpoint: /wp-json/pll/v1/languages"""
    async with _wc_client(client) as c:
        data = await _get_json(c, "/wp-json/pll/v1/languages")
    return data if isinstance(data, list) else []


# ---- Mapping ----

def _translations(raw) -> Dict[str, int]:
    if not isinstance(raw, dict):
        return {}
    out = {}
    for lang, i in raw.items():
        try:
            out[str(lang)] = int(i)
        except (TypeError, ValueError):
            continue
    return out


def map_default_attributes(
    rows,
    attribute_slugs: Dict[int, str],
    term_names: Dict[str, Dict[str, str]] | None = None,
) -> Dict[str, str]:
    """
    Woo REST default_attributes -> { attribute key: value }.
    Global attributes are keyed by taxonomy (pa_color) and their stored term
    slug is turned back into the term name; local ones are keyed by name.
    """
    term_names = term_names or {}
    out: Dict[str, str] = {}
    for row in rows or []:
        if not isinstance(row, dict):
            continue
        option = row.get("option")
        if option is None:
            continue
        key = attribute_slugs.get(row.get("id") or 0) or (row.get("name") or "").strip()
        if not key:
            continue
        names = term_names.get(key) or {}
        option = str(option)
        out[key] = names.get(option) or names.get(option.strip().lower()) or option
    return out


def map_wc_product(
    data: Dict[str, Any],
    attribute_slugs: Dict[int, str],
    term_names: Dict[str, Dict[str, str]] | None = None,
) -> Product:
    return Product(
        id=int(data["id"]),
        type=data.get("type") or "simple",
        name=data.get("name"),
        parent_id=data.get("parent_id") or None,
        default_attributes=map_default_attributes(data.get("default_attributes"), attribute_slugs, term_names),
        lang=data.get("lang"),
        translations=_translations(data.get("translations")),
    )


def map_wc_term(data: Dict[str, Any], taxonomy: str) -> Term:
    return Term(
        id=int(data["id"]),
        taxonomy=taxonomy,
        slug=data.get("slug") or "",
        name=data.get("name") or "",
        lang=data.get("lang"),
        translations=_translations(data.get("translations")),
    )


def map_pll_language(data: Dict[str, Any]) -> Language:
    return Language(
        slug=data.get("slug") or "",
        name=data.get("name"),
        locale=data.get("locale"),
        is_default=bool(data.get("is_default")),
    )


# ---- Snapshot ----

async def fetch_catalog_snapshot(
    product_id: int,
    client: Optional[httpx.AsyncClient] = None,
    translated_taxonomies: Iterable[str] | None = None,
) -> CatalogStore:
    """
    CatalogStore holding a product, its translations and their variations,
    the terms of every global attribute they use, and the site languages.
    """
    async with _wc_client(client) as c:
        store = CatalogStore(
            languages=[
                map_pll_language(lang) for lang in await get_pll_languages(c)
                if isinstance(lang, dict) and lang.get("slug")
            ],
            translated_taxonomies=translated_taxonomies,
        )
        source = await get_wc_product(product_id, c)
        if source is None:
            logger.info(f"[WC] product {product_id} not found, snapshot holds languages only")
            return store

        attributes = await get_wc_attributes(c)
        attribute_slugs = {int(a["id"]): a.get("slug") or "" for a in attributes if a.get("id")}

        raw_products = {int(source["id"]): source}
        for tid in _translations(source.get("translations")).values():
            if tid not in raw_products:
                data = await get_wc_product(tid, c)
                if data is not None:
                    raw_products[tid] = data

        used_attribute_ids = set()
        for data in raw_products.values():
            for row in data.get("default_attributes") or []:
                if isinstance(row, dict) and row.get("id") in attribute_slugs:
                    used_attribute_ids.add(row["id"])

        # taxonomy -> { term slug: term name }
        term_names: Dict[str, Dict[str, str]] = {}
        for attribute_id in sorted(used_attribute_ids):
            taxonomy = attribute_slugs[attribute_id]
            for t in await get_wc_attribute_terms(attribute_id, c):
                if not isinstance(t, dict) or not t.get("id"):
                    continue
                term = store.add_term(map_wc_term(t, taxonomy))
                if term.slug:
                    term_names.setdefault(taxonomy, {})[term.slug] = term.name

        for pid, data in raw_products.items():
            store.add_product(map_wc_product(data, attribute_slugs, term_names))
            for v in await get_wc_variations(pid, c):
                if isinstance(v, dict) and v.get("id"):
                    store.add_product(Product(id=int(v["id"]), type=PRODUCT_TYPE_VARIATION, parent_id=pid))

    logger.info(
        f"[WC] snapshot for product {product_id}: {len(store.products)} products, "
        f"{len(store.terms)} terms, {len(store.languages)} languages"
    )
    return store
