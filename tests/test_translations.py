from wpi.attributes import resolve_default_attribute_translations
from wpi.translations import (
    exclude_default_language,
    get_language,
    get_product_translation,
    get_product_translations,
    get_term_translations,
)


def test_product_translations(store):
    assert get_product_translations(store, 1) == {"en": 1, "fr": 2}
    assert get_product_translations(store, 1, exclude_default=True) == {"fr": 2}
    assert get_product_translations(store, 999) == {}


def test_product_translation_falls_back_to_product(store):
    assert get_product_translation(store, 1, "fr").id == 2
    assert get_product_translation(store, 1, "de").id == 1
    assert get_product_translation(store, 999, "fr") is None


def test_term_translations(store):
    assert get_term_translations(store, 20) == {"en": 20, "fr": 21, "de": 22}
    assert get_term_translations(store, 20, exclude_default=True) == {"fr": 21, "de": 22}
    # term without an explicit index still maps its own language
    assert get_term_translations(store, 21) == {"fr": 21}


def test_get_language(store):
    assert get_language(store, "fr").locale == "fr_FR"
    assert get_language(store, "xx") is None


def test_exclude_default_language(store):
    result = resolve_default_attribute_translations(store, 1)
    trimmed = exclude_default_language(result, store)
    assert list(trimmed) == ["fr", "de"]
    assert "en" in result
