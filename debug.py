from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from download_badges.errors import BadgeServiceError
from download_badges.models import BadgeData
from download_badges.services.dub import DubDownloads, DubInterval
from download_badges.services.wordpress import (
    DOWNLOAD_SERVICES,
    INSTALL_SERVICES,
    ExtensionType,
    WordpressInterval,
)
from download_badges.utils.logging import configure_logging


def _print(value: Any) -> None:
    print(json.dumps(value, indent=2, default=str))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Debug helper that calls a badge service directly against the live "
            "upstream API and prints the badge data."
        )
    )
    parser.add_argument("--log-level", default="DEBUG")

    subparsers = parser.add_subparsers(dest="command", required=True)

    dub = subparsers.add_parser("dub", help="DUB package downloads")
    dub.add_argument("interval", choices=[item.value for item in DubInterval])
    dub.add_argument("package_name", help="Package name, e.g. vibe-d")
    dub.add_argument(
        "--version", default=None, help="Numeric version like 0.8.4 or 'latest'"
    )

    wordpress = subparsers.add_parser(
        "wordpress", help="WordPress plugin/theme downloads"
    )
    wordpress.add_argument(
        "extension_type", choices=[item.value for item in ExtensionType]
    )
    wordpress.add_argument(
        "interval", choices=[item.value for item in WordpressInterval]
    )
    wordpress.add_argument("slug", help="Plugin or theme slug, e.g. bbpress")

    installs = subparsers.add_parser(
        "installs", help="WordPress plugin/theme active installs"
    )
    installs.add_argument(
        "extension_type", choices=[item.value for item in ExtensionType]
    )
    installs.add_argument("slug", help="Plugin or theme slug, e.g. twentyseventeen")

    return parser.parse_args(argv)


def _badge(args: argparse.Namespace) -> BadgeData:
    if args.command == "dub":
        return DubDownloads().handle(args.interval, args.package_name, args.version)

    if args.command == "wordpress":
        service = DOWNLOAD_SERVICES[args.extension_type]()
        return service.handle(args.interval, args.slug)

    if args.command == "installs":
        return INSTALL_SERVICES[args.extension_type]().handle(args.slug)

    raise RuntimeError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        badge = _badge(args)
    except BadgeServiceError as exc:
        _print(
            {
                "error": type(exc).__name__,
                "message": exc.pretty_message,
                "detail": str(exc),
            }
        )
        return 1

    _print(badge.to_endpoint_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
