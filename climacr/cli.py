"""CLI entry point for the Costa Rica weather dashboard."""

import argparse
import asyncio
import logging

from climacr.config.loader import load_config
from climacr.config.schema import DashboardConfig
from climacr.dashboard import Dashboard
from climacr.reporting.formatters import format_view_json, format_view_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="climacr",
        description="Costa Rica weather dashboard",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--backend-url", default=None, help="Backend base URL")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # locations
    sub.add_parser("locations", help="List known locations")

    # show
    show_p = sub.add_parser("show", help="Show weather for a location")
    show_p.add_argument("--location", default=None, help="Location slug")
    show_p.add_argument("--json", action="store_true", help="JSON output")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.backend_url:
        config = config.model_copy(
            update={
                "backend": config.backend.model_copy(
                    update={"backend_url": args.backend_url.rstrip("/")}
                )
            }
        )

    if args.command == "locations":
        return asyncio.run(_cmd_locations(config))
    elif args.command == "show":
        return asyncio.run(_cmd_show(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_locations(config: DashboardConfig) -> int:
    dashboard = Dashboard(config)
    await dashboard.catalog.load()
    if dashboard.catalog.error:
        print(f"Error: {dashboard.catalog.error}")
        return 1
    for loc in dashboard.catalog.locations:
        suffix = f" ({loc.region})" if loc.region else ""
        print(f"{loc.slug:<14} {loc.name}{suffix}")
    return 0


async def _cmd_show(config: DashboardConfig, args) -> int:
    dashboard = Dashboard(config)
    await dashboard.start()
    if args.location:
        try:
            dashboard.select(args.location)
        except KeyError:
            print(f"Error: unknown location {args.location!r}")
            return 1
    await dashboard.settle()

    view = dashboard.view()
    print(format_view_json(view) if args.json else format_view_text(view))
    return 0 if not view.errors else 1


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
