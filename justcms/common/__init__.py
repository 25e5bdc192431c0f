"""Models for JustCMS responses and helpers for working with them."""

from .schemas import (
    CategoriesResponse,
    Category,
    CategoryFilter,
    CodeBlock,
    # Content structures
    ContentBlock,
    CtaBlock,
    CustomBlock,
    EmbedBlock,
    HeaderBlock,
    Image,
    ImageBlock,
    ImageVariant,
    Layout,
    LayoutItem,
    ListBlock,
    ListOption,
    Menu,
    MenuItem,
    PageDetail,
    PageFilters,
    PageMeta,
    # API responses
    PagesResponse,
    PageSummary,
    TextBlock,
)
from .utils import (
    HasCategories,
    HasImages,
    HasStyles,
    HasVariants,
    get_first_image,
    get_large_image_variant,
    has_category,
    is_block_has_style,
)

__all__ = [
    "Category",
    "CategoriesResponse",
    "ImageVariant",
    "Image",
    "PageSummary",
    "PagesResponse",
    "PageMeta",
    "PageDetail",
    "ContentBlock",
    "HeaderBlock",
    "ListBlock",
    "ListOption",
    "EmbedBlock",
    "ImageBlock",
    "CodeBlock",
    "TextBlock",
    "CtaBlock",
    "CustomBlock",
    "Menu",
    "MenuItem",
    "Layout",
    "LayoutItem",
    "PageFilters",
    "CategoryFilter",
    "HasStyles",
    "HasVariants",
    "HasImages",
    "HasCategories",
    "is_block_has_style",
    "get_large_image_variant",
    "get_first_image",
    "has_category",
]
