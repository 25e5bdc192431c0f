"""Helpers for working with fetched content.

These work on anything exposing the attribute they need (see the
protocols below), so they accept both the models in ``schemas`` and
compatible objects from elsewhere. They do not guard against empty
sequences: indexing past the end raises ``IndexError``.
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from .schemas import Category, Image, ImageVariant

_T_co = TypeVar("_T_co", covariant=True)


class HasStyles(Protocol):
    """Anything carrying CMS style markers (content blocks, menu items)."""

    @property
    def styles(self) -> Sequence[str]: ...


class HasVariants(Protocol[_T_co]):
    @property
    def variants(self) -> Sequence[_T_co]: ...


class HasImages(Protocol[_T_co]):
    @property
    def images(self) -> Sequence[_T_co]: ...


class HasCategories(Protocol):
    @property
    def categories(self) -> Sequence[Category]: ...


def is_block_has_style(block: HasStyles, style: str) -> bool:
    """Check if a block has a style, ignoring case."""
    wanted = style.lower()
    return any(s.lower() == wanted for s in block.styles)


def get_large_image_variant(image: HasVariants[ImageVariant]) -> ImageVariant:
    """Get the large rendition of an image.

    The API lists variants smallest first; the second one is the large
    rendition. This is positional only, sizes are not compared.
    """
    return image.variants[1]


def get_first_image(block: HasImages[Image]) -> Image:
    """Get the first image of an image block."""
    return block.images[0]


def has_category(page: HasCategories, category_slug: str) -> bool:
    """Check if a page belongs to the category with this slug."""
    return category_slug in [category.slug for category in page.categories]
