import pytest

from wpi.models import Language, Product, Term
from wpi.store import CatalogStore


@pytest.fixture
def languages():
    return [
        Language(slug="en", name="English", locale="en_US", is_default=True),
        Language(slug="fr", name="Français", locale="fr_FR"),
        Language(slug="de", name="Deutsch", locale="de_DE"),
    ]


@pytest.fixture
def store(languages):
    # pa_color: Red has a French translation only; pa_size: Large has fr + de
    terms = [
        Term(id=10, taxonomy="pa_color", slug="red", name="Red", lang="en", translations={"en": 10, "fr": 11}),
        Term(id=11, taxonomy="pa_color", slug="rouge", name="Rouge", lang="fr", translations={"en": 10, "fr": 11}),
        Term(id=20, taxonomy="pa_size", slug="large", name="Large", lang="en",
             translations={"en": 20, "fr": 21, "de": 22}),
        Term(id=21, taxonomy="pa_size", slug="grand", name="Grand", lang="fr"),
        Term(id=22, taxonomy="pa_size", slug="gross", name="Groß", lang="de"),
    ]
    products = [
        Product(id=1, type="variable", lang="en", translations={"en": 1, "fr": 2},
                default_attributes={"pa_color": "Red", "custom": "Blue", "pa_size": "Large"}),
        Product(id=2, type="variable", lang="fr", translations={"en": 1, "fr": 2}),
        Product(id=3, type="simple", lang="en", default_attributes={"custom": "Blue"}),
        Product(id=4, type="variable", lang="en"),
        Product(id=101, type="variation", parent_id=1),
        Product(id=102, type="variation", parent_id=1),
    ]
    return CatalogStore(products=products, terms=terms, languages=languages, translated_taxonomies=[])
