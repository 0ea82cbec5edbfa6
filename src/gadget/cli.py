"""Command line interface.

Usage:
    gadget serve [--host HOST] [--port PORT]
    gadget init
    gadget list
    gadget add TYPE ALIAS DESTINATION
    gadget update ID DESTINATION
    gadget remove ID
    gadget resolve PATH

All commands use the store configured through GADGET_* environment
variables; --store-path points the YAML store at another file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from gadget.config import Settings
from gadget.core.resolver import Resolver
from gadget.errors import ConfigError, GadgetError
from gadget.service.redirects import RedirectService
from gadget.store.factory import open_store
from gadget.store.yaml_store import YamlStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gadget", description="Manage URL redirects")
    parser.add_argument("--store-path", help="YAML document to use instead of GADGET_STORE_PATH")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the web server")
    serve.add_argument("--host", help="Bind host (default GADGET_HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Bind port (default GADGET_PORT or 8080)")

    sub.add_parser("init", help="Create an empty YAML document if missing")
    sub.add_parser("list", help="List redirects")

    add = sub.add_parser("add", help="Create a redirect")
    add.add_argument("type")
    add.add_argument("alias")
    add.add_argument("destination")

    update = sub.add_parser("update", help="Change a redirect's destination")
    update.add_argument("id")
    update.add_argument("destination")

    remove = sub.add_parser("remove", help="Delete a redirect")
    remove.add_argument("id")

    resolve = sub.add_parser("resolve", help="Show where a path redirects to")
    resolve.add_argument("path")

    return parser


def _serve(settings: Settings, args: argparse.Namespace) -> int:
    import uvicorn

    from gadget.api.app import create_app

    if args.host:
        settings = replace(settings, host=args.host)
    if args.port:
        settings = replace(settings, port=args.port)

    app = create_app(settings)
    logger.info(f"Running on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run a command and return its exit code."""
    args = build_parser().parse_args(argv)

    if settings is None:
        try:
            settings = Settings.from_env()
        except ConfigError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    if args.store_path:
        settings = replace(settings, store="yaml", store_path=Path(args.store_path))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return _serve(settings, args)

    store = open_store(settings)
    service = RedirectService(store)

    try:
        if args.command == "init":
            if not isinstance(store, YamlStore):
                print(f"Nothing to initialize for store {settings.store!r}")
            elif store.initialize():
                print(f"Created {store.path}")
            else:
                print(f"{store.path} already exists")

        elif args.command == "list":
            listing = service.list()
            for redirect in listing.redirects:
                print(f"{redirect.id}\t{redirect.type}\t{redirect.alias}\t{redirect.destination}")
            for failure in listing.malformed:
                print(f"{failure.id}\t(malformed: {failure.reason})\t{failure.raw_alias}")

        elif args.command == "add":
            created = service.create(args.type, args.alias, args.destination)
            print(created.id)

        elif args.command == "update":
            updated = service.update(args.id, args.destination)
            print(f"{updated.id}\t{updated.destination}")

        elif args.command == "remove":
            if not service.delete(args.id):
                print(f"No redirect with id {args.id}")

        elif args.command == "resolve":
            resolver = Resolver.compile(store.load(), settings.ui_location)
            print(resolver.find_redirect(args.path.lstrip("/")))

    except GadgetError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())
