"""Command line access to a JustCMS project.

Fetches one resource and prints it as JSON, using the same keys as the API.

Usage:
    justcms categories
    justcms pages --category blog --start 0 --offset 10
    justcms page about-us --version draft
    justcms menu main
    justcms layout footer header
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from pydantic import BaseModel

from .client import JustCMSClient, create_client
from .common.schemas import PageFilters
from .core.exceptions import APIError, ConfigurationError
from .core.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="justcms", description="Query the JustCMS public API")
    parser.add_argument("--token", help="API token (default: $PUBLIC_JUSTCMS_TOKEN)")
    parser.add_argument("--project", help="Project ID (default: $PUBLIC_JUSTCMS_PROJECT)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("categories", help="List categories")

    pages = commands.add_parser("pages", help="List pages")
    pages.add_argument("--category", "-c", help="Only pages in this category slug")
    pages.add_argument("--start", type=int, help="Index of the first page")
    pages.add_argument("--offset", type=int, help="Number of pages to return")

    page = commands.add_parser("page", help="Show one page")
    page.add_argument("slug")
    page.add_argument("--version", help="Page version (e.g. draft)")

    menu = commands.add_parser("menu", help="Show a menu")
    menu.add_argument("id")

    layout = commands.add_parser("layout", help="Show one or more layouts")
    layout.add_argument("ids", nargs="+", metavar="id")

    return parser


async def fetch(cms: JustCMSClient, args: argparse.Namespace) -> Any:
    """Run the requested command and return its result."""
    if args.command == "categories":
        return await cms.get_categories()
    if args.command == "pages":
        filters = PageFilters.by_category(args.category) if args.category else None
        return await cms.get_pages(filters=filters, start=args.start, offset=args.offset)
    if args.command == "page":
        return await cms.get_page_by_slug(args.slug, args.version)
    if args.command == "menu":
        return await cms.get_menu_by_id(args.id)
    if args.command == "layout":
        if len(args.ids) == 1:
            return await cms.get_layout_by_id(args.ids[0])
        return await cms.get_layouts_by_ids(args.ids)
    raise ValueError(f"Unknown command: {args.command}")


def to_json(result: Any) -> str:
    """Serialize models (or lists of them) with API field names."""
    if isinstance(result, BaseModel):
        data = result.model_dump(mode="json", by_alias=True)
    else:
        data = [item.model_dump(mode="json", by_alias=True) for item in result]
    return json.dumps(data, indent=2, ensure_ascii=False)


async def run(args: argparse.Namespace) -> int:
    try:
        cms = create_client(args.token, args.project)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    async with cms:
        try:
            result = await fetch(cms, args)
        except APIError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(to_json(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        setup_logging("DEBUG")
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
