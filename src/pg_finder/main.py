"""Command-line entry point for browsing listings."""

import argparse
import asyncio
import logging
import sys

from pg_finder.client import PropertyFeed
from pg_finder.config import Settings
from pg_finder.logging import configure_logging, get_logger
from pg_finder.models import CriterionKind, Property, format_price
from pg_finder.session import ListingSession

logger = get_logger(__name__)


def format_listing(prop: Property) -> str:
    """One-line summary of a listing for terminal output."""
    parts = [prop.title, prop.location, format_price(prop.price)]
    if prop.tenant_type is not None:
        parts.append(prop.tenant_type.value)
    line = " | ".join(parts)
    if prop.services:
        line += f" [{', '.join(prop.services)}]"
    return line


def build_session(properties: tuple[Property, ...], args: argparse.Namespace) -> ListingSession:
    """Replay command-line choices onto a session, as the filter form would."""
    session = ListingSession(properties)
    if args.location:
        session.set_criterion(CriterionKind.LOCATION, args.location)
    if args.max_price:
        session.set_criterion(CriterionKind.MAX_PRICE, args.max_price)
    if args.tenant_type:
        session.set_criterion(CriterionKind.TENANT_TYPE, args.tenant_type)
    for service in args.service:
        if service not in session.criteria.services:
            session.toggle_service(service)
    if args.search:
        session.set_search_text(args.search)
    return session


async def run_search(settings: Settings, args: argparse.Namespace) -> ListingSession:
    """Fetch one snapshot and print the displayed subset."""
    feed = PropertyFeed(settings.properties_url, timeout=settings.request_timeout_seconds)
    properties = await feed.fetch()
    session = build_session(properties, args)

    chips = session.active_filter_chips()
    if session.search_active:
        print(f"Search: {session.search_text!r}")
        if chips:
            print("(filters ignored while searching)")
    if chips:
        print("Active Filters: " + ", ".join(chip["label"] for chip in chips))

    for prop in session.displayed:
        print(format_listing(prop))
    print(f"Found {session.result_count} properties")
    return session


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="PG Finder - browse and filter rental listings")
    parser.add_argument("--search", default="", help="Free-text search (overrides filters)")
    parser.add_argument("--location", default="", help="Location substring, e.g. 'Baner'")
    parser.add_argument("--max-price", default="", help="Maximum monthly rent")
    parser.add_argument(
        "--tenant-type",
        default="",
        help="Tenant type: Family, Bachelor, Student, Working Professional, Girls, Boys",
    )
    parser.add_argument(
        "--service",
        action="append",
        default=[],
        help="Required amenity (repeatable), e.g. --service Wifi --service AC",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the JSON API server instead of printing results",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    args = parser.parse_args()

    try:
        settings = Settings()
    except Exception as e:
        configure_logging(json_output=False)
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}")
        print("Check the PG_FINDER_* environment variables or your .env file.")
        sys.exit(1)

    configure_logging(
        json_output=settings.log_json,
        level=logging.DEBUG if args.debug else logging.INFO,
    )

    if args.serve:
        import uvicorn

        from pg_finder.web.app import create_app

        app = create_app(settings)
        uvicorn.run(app, host=settings.web_host, port=settings.web_port, log_level="info")
    else:
        asyncio.run(run_search(settings, args))


if __name__ == "__main__":
    main()
