import copy

import pytest

from wpi.attributes import (
    AttributeTranslationResolver,
    LocalNode,
    TaxonomyNode,
    resolve_default_attribute_translations,
)
from wpi.models import Product


def _variable(store, attrs, product_id=50):
    store.add_product(Product(id=product_id, type="variable", default_attributes=attrs))
    return product_id


@pytest.mark.parametrize("lang", [None, "en", "fr", "xx"])
def test_not_variable_or_no_defaults_is_empty(store, lang):
    assert resolve_default_attribute_translations(store, 3, lang) == {}  # simple
    assert resolve_default_attribute_translations(store, 4, lang) == {}  # no defaults
    assert resolve_default_attribute_translations(store, 999, lang) == {}  # missing


def test_local_attribute_copied_per_language(store):
    pid = _variable(store, {"custom": "Blue"})
    result = resolve_default_attribute_translations(store, pid)
    assert result == {"en": {"custom": "Blue"}, "fr": {"custom": "Blue"}, "de": {"custom": "Blue"}}

    result["fr"]["custom"] = "Bleu"
    assert result["en"]["custom"] == "Blue"
    assert result["fr"] is not result["de"]


def test_taxonomy_attribute_translated_to_slug(store):
    pid = _variable(store, {"pa_color": "Red"})
    assert resolve_default_attribute_translations(store, pid, "fr") == {"fr": {"pa_color": "rouge"}}


def test_untranslated_term_key_is_omitted(store):
    pid = _variable(store, {"pa_color": "Red"})
    assert resolve_default_attribute_translations(store, pid, "de") == {"de": {}}


def test_all_languages_include_default(store):
    result = resolve_default_attribute_translations(store, 1)
    assert list(result) == ["en", "fr", "de"]
    assert result["en"] == {"pa_color": "red", "custom": "Blue", "pa_size": "large"}
    assert result["fr"] == {"pa_color": "rouge", "custom": "Blue", "pa_size": "grand"}
    assert result["de"] == {"custom": "Blue", "pa_size": "gross"}


def test_unknown_term_is_omitted(store):
    pid = _variable(store, {"pa_color": "Mauve", "custom": "Blue"})
    assert resolve_default_attribute_translations(store, pid, "fr") == {"fr": {"custom": "Blue"}}


def test_dangling_translation_is_omitted(store):
    # translation index points at a term that no longer exists
    store.terms[10].translations["de"] = 999
    pid = _variable(store, {"pa_color": "Red"})
    assert resolve_default_attribute_translations(store, pid, "de") == {"de": {}}


def test_classify_produces_tagged_nodes(store):
    resolver = AttributeTranslationResolver(store, store, store)
    nodes = resolver.classify({"pa_color": "Red", "custom": "Blue"})
    assert nodes == [TaxonomyNode(term_id=10, taxonomy="pa_color"), LocalNode(key="custom", value="Blue")]


def test_repeated_calls_are_identical(store):
    before = copy.deepcopy(store.to_dict())
    first = resolve_default_attribute_translations(store, 1)
    second = resolve_default_attribute_translations(store, 1)
    assert first == second
    assert store.to_dict() == before


def test_output_order_follows_input_order(store):
    a = _variable(store, {"pa_size": "Large", "custom": "Blue", "pa_color": "Red"}, product_id=60)
    b = _variable(store, {"pa_color": "Red", "pa_size": "Large", "custom": "Blue"}, product_id=61)
    ra = resolve_default_attribute_translations(store, a, "fr")["fr"]
    rb = resolve_default_attribute_translations(store, b, "fr")["fr"]
    assert set(ra.items()) == set(rb.items())
    assert list(ra) == ["pa_size", "custom", "pa_color"]
    assert list(rb) == ["pa_color", "pa_size", "custom"]


def test_explicit_translated_taxonomies(store):
    # only pa_size is translated: pa_color is treated as a local string
    store.translated_taxonomies = {"pa_size"}
    pid = _variable(store, {"pa_color": "Red", "pa_size": "Large"})
    assert resolve_default_attribute_translations(store, pid, "de") == {
        "de": {"pa_color": "Red", "pa_size": "gross"}
    }
