#!/usr/bin/env python3
"""Seed a demo redirect document.

Usage:
    python scripts/seed_demo.py [PATH]

Writes demo.yaml (or PATH) with a few alias and direct redirects, then
prints where some sample paths resolve to.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from gadget.config import UI_BASE_PATH  # noqa: E402
from gadget.core.resolver import Resolver  # noqa: E402
from gadget.models.domain import RedirectDocument  # noqa: E402
from gadget.service.redirects import RedirectService  # noqa: E402
from gadget.store.yaml_store import YamlStore  # noqa: E402

# Constants
DEMO_STORE_PATH = PROJECT_ROOT / "demo.yaml"

# (type, alias, destination)
DEMO_REDIRECTS = [
    ("alias", "google", "https://duckduckgo.com/{?q=$1}"),
    ("alias", "gh", "https://github.com{/$1{/$2}}"),
    ("direct", "docs", "https://docs.python.org/3"),
    ("short", "home", "https://example.com"),
]

SAMPLE_PATHS = ["google", "google fastapi yaml", "gh", "gh tiangolo fastapi", "docs/library", "nope"]


def main() -> int:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEMO_STORE_PATH
    store = YamlStore(path)
    store.save(RedirectDocument())

    service = RedirectService(store)
    for redirect_type, alias, destination in DEMO_REDIRECTS:
        created = service.create(redirect_type, alias, destination)
        print(f"OK: {created.id} {redirect_type}:{alias} => {destination}")

    resolver = Resolver.compile(store.load(), UI_BASE_PATH)
    for sample in SAMPLE_PATHS:
        print(f"    /{sample} => {resolver.find_redirect(sample)}")

    print(f"Seeded {len(DEMO_REDIRECTS)} redirects into {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
