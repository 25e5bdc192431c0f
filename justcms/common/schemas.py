"""Pydantic models for the JustCMS public API.

Field names are snake_case in Python and camelCase on the wire
(``cover_image`` <-> ``coverImage``). Models accept either spelling and
``model_dump(by_alias=True)`` reproduces the API payload.

All models are frozen: a response is a snapshot, never edited in place.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JustCMSModel(BaseModel):
    """Base for every API record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Categories & Images
# =============================================================================


class Category(JustCMSModel):
    """A page category, identified by its slug."""

    name: str
    slug: str


class CategoriesResponse(JustCMSModel):
    categories: list[Category]


class ImageVariant(JustCMSModel):
    """One rendition of an image."""

    url: str
    width: int
    height: int
    filename: str


class Image(JustCMSModel):
    """An image with its renditions.

    By convention the first variant is the thumbnail and the second the
    large rendition; the API does not guarantee it.
    """

    alt: str
    variants: list[ImageVariant]


# =============================================================================
# Pages
# =============================================================================


class PageSummary(JustCMSModel):
    """Listing representation of a page."""

    title: str
    subtitle: str
    cover_image: Image | None = None
    slug: str
    categories: list[Category] = Field(default_factory=list)
    created_at: str
    updated_at: str


class PagesResponse(JustCMSModel):
    """One window of the page listing.

    ``total`` counts every matching page, not just the returned window.
    """

    items: list[PageSummary]
    total: int


class PageMeta(JustCMSModel):
    """SEO metadata of a page."""

    title: str
    description: str


# =============================================================================
# Content Blocks
# =============================================================================


class HeaderBlock(JustCMSModel):
    type: Literal["header"] = "header"
    styles: list[str] = Field(default_factory=list)
    header: str
    subheader: str | None = None
    size: str


class ListOption(JustCMSModel):
    title: str
    subtitle: str | None = None


class ListBlock(JustCMSModel):
    type: Literal["list"] = "list"
    styles: list[str] = Field(default_factory=list)
    options: list[ListOption]


class EmbedBlock(JustCMSModel):
    type: Literal["embed"] = "embed"
    styles: list[str] = Field(default_factory=list)
    url: str


class ImageBlock(JustCMSModel):
    """A block holding one or more images (gallery when several)."""

    type: Literal["image"] = "image"
    styles: list[str] = Field(default_factory=list)
    images: list[Image]


class CodeBlock(JustCMSModel):
    type: Literal["code"] = "code"
    styles: list[str] = Field(default_factory=list)
    code: str


class TextBlock(JustCMSModel):
    type: Literal["text"] = "text"
    styles: list[str] = Field(default_factory=list)
    text: str


class CtaBlock(JustCMSModel):
    """Call-to-action button."""

    type: Literal["cta"] = "cta"
    styles: list[str] = Field(default_factory=list)
    text: str
    url: str
    description: str | None = None


class CustomBlock(JustCMSModel):
    """A block defined in the CMS project itself.

    Only ``block_id`` is known ahead of time; every other key the API sends
    is kept verbatim and exposed through ``fields``.
    """

    model_config = ConfigDict(extra="allow")

    type: Literal["custom"] = "custom"
    styles: list[str] = Field(default_factory=list)
    block_id: str

    @property
    def fields(self) -> dict[str, Any]:
        """Additional block fields keyed by their API name."""
        return dict(self.model_extra or {})

    def get(self, name: str, default: Any = None) -> Any:
        """Look up an additional field by its API name."""
        return self.fields.get(name, default)


ContentBlock = Annotated[
    HeaderBlock
    | ListBlock
    | EmbedBlock
    | ImageBlock
    | CodeBlock
    | TextBlock
    | CtaBlock
    | CustomBlock,
    Field(discriminator="type"),
]


class PageDetail(PageSummary):
    """Full page, including metadata and body content."""

    meta: PageMeta
    content: list[ContentBlock] = Field(default_factory=list)


# =============================================================================
# Menus
# =============================================================================


class MenuItem(JustCMSModel):
    """A navigation entry; ``children`` nest without a depth limit."""

    title: str
    subtitle: str | None = None
    icon: str = ""
    url: str
    styles: list[str] = Field(default_factory=list)
    children: list["MenuItem"] = Field(default_factory=list)


class Menu(JustCMSModel):
    id: str
    name: str
    items: list[MenuItem] = Field(default_factory=list)


# =============================================================================
# Layouts
# =============================================================================


class LayoutItem(JustCMSModel):
    """A typed key/value entry of a layout.

    ``value`` is a bool for ``boolean`` items and a string otherwise.
    """

    label: str
    description: str = ""
    uid: str
    type: Literal["text", "html", "boolean", "svg"]
    value: bool | str


class Layout(JustCMSModel):
    """A named set of items used for site-wide, non-page content."""

    id: str
    name: str
    items: list[LayoutItem] = Field(default_factory=list)


# =============================================================================
# Query Filters
# =============================================================================


class CategoryFilter(JustCMSModel):
    slug: str


class PageFilters(JustCMSModel):
    """Filters accepted by the page listing."""

    category: CategoryFilter | None = None

    @classmethod
    def by_category(cls, slug: str) -> "PageFilters":
        """Filter pages belonging to the category with this slug."""
        return cls(category=CategoryFilter(slug=slug))

    def to_query(self) -> dict[str, str]:
        """Convert to API query parameters, skipping unset filters."""
        query = {}
        if self.category is not None and self.category.slug:
            query["filter.category.slug"] = self.category.slug
        return query
