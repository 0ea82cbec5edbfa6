"""YAML file store.

The document is a single YAML file:

    redirects:
    - alias: url:gadget:short:foo
      destination: http://x.com
      id: abc123

Every load parses the whole file; every save rewrites it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from gadget.errors import StoreReadError, StoreWriteError
from gadget.models.domain import RedirectDocument
from gadget.store.base import RedirectStore, document_from_mapping, document_to_mapping

logger = logging.getLogger(__name__)


class YamlStore(RedirectStore):
    """Store backed by one YAML file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"YamlStore({str(self.path)!r})"

    def initialize(self) -> bool:
        """Write an empty document if the file does not exist.

        Returns:
            True if a new file was created.
        """
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save(RedirectDocument())
        logger.info(f"Created empty redirect document at {self.path}")
        return True

    def load(self) -> RedirectDocument:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise StoreReadError(f"Cannot read {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise StoreReadError(f"Invalid YAML in {self.path}: {e}") from e

        return document_from_mapping(data, str(self.path))

    def save(self, document: RedirectDocument) -> None:
        data = document_to_mapping(document)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        except OSError as e:
            raise StoreWriteError(f"Cannot write {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise StoreWriteError(f"Cannot serialize document for {self.path}: {e}") from e
