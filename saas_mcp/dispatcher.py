"""Name-based dispatch over the fixed tool and resource catalogs.

The `Dispatcher` owns two read-only descriptor maps and two handler maps,
built once at startup. Lookups are exact string matches; anything outside
the catalogs fails with a `DispatchError` subclass that the transport layer
turns into a failure envelope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from mcp import types

logger = logging.getLogger(__name__)

ToolHandler = Callable[[Mapping[str, Any]], list[types.TextContent]]
ResourceProvider = Callable[[], str]


class DispatchError(Exception):
    """Base class for request-level failures. The server keeps serving."""


class UnknownToolError(DispatchError, LookupError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class UnknownResourceError(DispatchError, LookupError):
    """Raised when a resource uri is not in the catalog."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")


class InvalidArgumentsError(DispatchError, ValueError):
    """Raised when tool arguments are malformed or miss required fields."""


@dataclass(frozen=True)
class ToolEntry:
    descriptor: types.Tool
    handler: ToolHandler


@dataclass(frozen=True)
class ResourceEntry:
    descriptor: types.Resource
    provider: ResourceProvider


@dataclass(frozen=True)
class ResourceContent:
    """A single resource content block."""

    uri: str
    mime_type: str
    text: str


class Dispatcher:
    """Dispatch tool calls and resource reads by exact name.

    Args:
        tools: Tool entries in advertised order.
        resources: Resource entries in advertised order.

    Raises:
        ValueError: If two entries share a tool name or a resource uri.
    """

    def __init__(self, tools: Iterable[ToolEntry], resources: Iterable[ResourceEntry]):
        self._tools: dict[str, types.Tool] = {}
        self._tool_handlers: dict[str, ToolHandler] = {}
        for entry in tools:
            name = entry.descriptor.name
            if name in self._tools:
                raise ValueError(f"Duplicate tool name '{name}'")
            self._tools[name] = entry.descriptor
            self._tool_handlers[name] = entry.handler

        self._resources: dict[str, types.Resource] = {}
        self._resource_providers: dict[str, ResourceProvider] = {}
        for entry in resources:
            uri = str(entry.descriptor.uri)
            if uri in self._resources:
                raise ValueError(f"Duplicate resource uri '{uri}'")
            self._resources[uri] = entry.descriptor
            self._resource_providers[uri] = entry.provider

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    @property
    def resource_uris(self) -> list[str]:
        return list(self._resources)

    def list_tools(self) -> list[types.Tool]:
        """Return all tool descriptors in registration order."""
        return list(self._tools.values())

    def list_resources(self) -> list[types.Resource]:
        """Return all resource descriptors in registration order."""
        return list(self._resources.values())

    def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> list[types.TextContent]:
        """Invoke the handler registered for `name`.

        Only the presence of required arguments is checked; their types are
        passed through as received.

        Raises:
            UnknownToolError: If `name` is not a registered tool.
            InvalidArgumentsError: If `arguments` is not a mapping or a
                required argument is missing.
        """
        descriptor = self._tools.get(name)
        if descriptor is None:
            logger.warning("Rejected call to unknown tool %r", name)
            raise UnknownToolError(name)

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError(
                f"Arguments for {name} must be an object, got {type(arguments).__name__}"
            )

        required = descriptor.inputSchema.get("required") or []
        missing = [arg for arg in required if arg not in arguments]
        if missing:
            logger.warning("Call to %s is missing %s", name, ", ".join(missing))
            raise InvalidArgumentsError(
                f"Missing required argument(s) for {name}: {', '.join(missing)}"
            )

        logger.debug("Calling tool %s with %d argument(s)", name, len(arguments))
        return self._tool_handlers[name](arguments)

    def read_resource(self, uri: str) -> ResourceContent:
        """Return the content block for `uri`, stamped with its declared mimeType.

        Raises:
            UnknownResourceError: If `uri` is not a registered resource.
        """
        descriptor = self._resources.get(uri)
        if descriptor is None:
            logger.warning("Rejected read of unknown resource %r", uri)
            raise UnknownResourceError(uri)
        return ResourceContent(
            uri=uri,
            mime_type=descriptor.mimeType or "text/plain",
            text=self._resource_providers[uri](),
        )
