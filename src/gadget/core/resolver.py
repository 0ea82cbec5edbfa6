"""Redirect resolution.

Compiles stored redirects into matchers and turns a request path into a
destination URL.

Two redirect types take part:

- direct: "/<alias>" and anything below it forward to the destination,
  with the remainder of the path appended.
- alias: the first word of the path selects the redirect, further words
  are arguments. The destination may carry nested optional groups:

      http://x.com{/foo/$1{/bar/$2}}

  expands to the templates http://x.com, http://x.com/foo/$1 and
  http://x.com/foo/$1/bar/$2; the template is picked by argument count.

Other types are ignored. Paths that match nothing go to the default
destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from urllib.parse import urlencode

from gadget.core.codec import decode_record
from gadget.models.domain import RedirectDocument

logger = logging.getLogger(__name__)

DIRECT_TYPE = "direct"
ALIAS_TYPE = "alias"


def _as_path(alias: str) -> str:
    alias = alias.lower()
    return alias if alias.startswith("/") else f"/{alias}"


@dataclass
class DestinationTemplate:
    """A destination with the number of $N parameters it consumes."""

    parameter_count: int
    template: str


def expand_destination(destination: str) -> list[DestinationTemplate]:
    """Expand nested {...} groups into one template per argument count.

    Unbalanced or mis-nested braces keep the destination as a single
    template with no parameters.
    """
    parts = destination.replace("}", "{").split("{")
    base = parts.pop(0)

    last_open = destination.rfind("{")
    first_close = destination.find("}")

    if not parts:
        return [DestinationTemplate(0, destination)]
    if last_open > first_close:
        logger.warning(f"Destination has mismatched params: `{destination}`")
        return [DestinationTemplate(0, destination)]
    if len(parts) % 2 != 0:
        logger.warning(f"Destination has mismatched `{{` | `}}`: `{destination}`")
        return [DestinationTemplate(0, destination)]

    templates = [DestinationTemplate(0, base)]
    pre = ""
    post = ""
    while parts:
        post = parts.pop() + post
        pre = pre + parts.pop(0)
        templates.append(DestinationTemplate(len(templates), f"{base}{pre}{post}"))
    return templates


@dataclass
class DirectRedirect:
    """Path-prefix redirect."""

    path: str
    destination: str

    @classmethod
    def create(cls, alias: str, destination: str) -> DirectRedirect:
        return cls(path=_as_path(alias), destination=destination)

    def matches(self, path: str) -> bool:
        path = _as_path(path)
        return path == self.path or path.startswith(self.path + "/")

    def get_destination(self, path: str) -> str:
        remainder = _as_path(path)[len(self.path):]
        return f"{self.destination}{remainder}"


@dataclass
class AliasRedirect:
    """Keyword redirect with positional arguments."""

    alias: str
    templates: list[DestinationTemplate]

    @classmethod
    def create(cls, alias: str, destination: str) -> AliasRedirect:
        return cls(alias=_as_path(alias), templates=expand_destination(destination))

    def matches(self, path: str) -> bool:
        keyword = path.split(" ")[0]
        return _as_path(keyword) == self.alias

    def get_destination(self, path: str) -> str:
        arguments = [word for word in path.split(" ")[1:] if word]
        return self.evaluate(arguments)

    def evaluate(self, arguments: list[str]) -> str:
        """Fill the template selected by len(arguments).

        Arguments beyond the chosen template's parameters are appended,
        separated by spaces.
        """
        if len(arguments) < len(self.templates):
            chosen = self.templates[len(arguments)]
        else:
            chosen = self.templates[-1]

        remaining = list(arguments)
        destination = chosen.template
        for number in range(1, chosen.parameter_count + 1):
            destination = destination.replace(f"${number}", remaining.pop(0))

        if remaining:
            destination = f"{destination} {' '.join(remaining)}"
        return destination


@dataclass
class Resolver:
    """Compiled redirects for one document."""

    default_destination: str
    direct_redirects: list[DirectRedirect] = field(default_factory=list)
    alias_redirects: list[AliasRedirect] = field(default_factory=list)
    ui_location: str = ""

    @classmethod
    def compile(cls, document: RedirectDocument, ui_location: str) -> Resolver:
        """Compile a document.

        Args:
            document: Loaded store document.
            ui_location: Where unknown paths go when the document has no
                missing_redirect_destination. "?search=<path>" is added.
        """
        resolver = cls(
            default_destination=document.missing_redirect_destination or "",
            ui_location=ui_location,
        )

        for raw in document.redirects:
            result = decode_record(raw)
            if result.entity is None:
                reason = result.failure.reason if result.failure else "undecodable alias"
                logger.warning(f"DROPPED: Unable to process alias {raw.alias!r}: {reason}")
                continue

            entity = result.entity
            if entity.type == DIRECT_TYPE:
                resolver.direct_redirects.append(
                    DirectRedirect.create(entity.alias, entity.destination)
                )
            elif entity.type == ALIAS_TYPE:
                resolver.alias_redirects.append(
                    AliasRedirect.create(entity.alias, entity.destination)
                )
            else:
                logger.debug(f"Skipping redirect {entity.id} of type {entity.type!r}")
        return resolver

    def find_redirect(self, path: str) -> str:
        """Destination for a request path (without the leading slash)."""
        lowered = path.lower()
        for direct in self.direct_redirects:
            if direct.matches(lowered):
                return direct.get_destination(lowered)

        for alias in self.alias_redirects:
            if alias.matches(path):
                return alias.get_destination(path)

        return self.missing_destination(path)

    def missing_destination(self, path: str) -> str:
        if self.default_destination:
            return self.default_destination
        separator = "&" if "?" in self.ui_location else "?"
        return f"{self.ui_location}{separator}{urlencode({'search': path})}"
