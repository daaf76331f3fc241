# wpi/models.py
# ---------------------------------------------------------
# Catalog entities read by the translation helpers.
# Shapes follow the WooCommerce / Polylang REST payloads.
# ---------------------------------------------------------
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

PRODUCT_TYPE_SIMPLE = "simple"
PRODUCT_TYPE_VARIABLE = "variable"
PRODUCT_TYPE_VARIATION = "variation"

# Query parameters Polylang puts on the "add translation" link
FROM_POST_PARAM = "from_post"
NEW_LANG_PARAM = "new_lang"


class Product(BaseModel):
    id: int = Field(..., description="WooCommerce product ID")
    type: str = Field(PRODUCT_TYPE_SIMPLE, description="simple, variable, variation, ...")
    name: Optional[str] = None
    parent_id: Optional[int] = Field(None, description="Parent product ID (variations only)")
    # attribute key (pa_* taxonomy or local attribute name) -> selected value
    default_attributes: Dict[str, str] = Field(default_factory=dict)
    lang: Optional[str] = None
    translations: Dict[str, int] = Field(default_factory=dict)

    class Config:
        extra = "allow"

    @property
    def is_variable(self) -> bool:
        return self.type == PRODUCT_TYPE_VARIABLE

    @property
    def is_simple(self) -> bool:
        return self.type == PRODUCT_TYPE_SIMPLE


class Term(BaseModel):
    id: int
    taxonomy: str
    slug: str
    name: str
    lang: Optional[str] = None
    translations: Dict[str, int] = Field(default_factory=dict)

    class Config:
        extra = "allow"


class Language(BaseModel):
    slug: str
    name: Optional[str] = None
    locale: Optional[str] = None
    is_default: bool = False

    class Config:
        extra = "allow"


class RequestContext(BaseModel):
    """
    What the host knows about the current admin request:
    the screen being rendered and the raw query parameters.
    """
    screen_post_type: Optional[str] = None
    screen_action: Optional[str] = None
    query: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_add_new_product(self) -> bool:
        return self.screen_post_type == "product" and self.screen_action == "add"

    @property
    def is_translation_request(self) -> bool:
        return (
            self.query.get(FROM_POST_PARAM) is not None
            and self.query.get(NEW_LANG_PARAM) is not None
        )
