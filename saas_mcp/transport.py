"""Stream relay that holds back end-of-input until in-flight requests are answered.

The low-level MCP server cancels its handlers as soon as the read stream ends.
A host that writes its last request and immediately closes stdin would then
never see the response. `drain_on_eof` sits between the stdio transport and
the server: it records the id of every request it forwards, removes it when
the matching response or error is written, and only ends the server's read
stream once nothing is outstanding.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Union

import anyio
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
from mcp import types
from mcp.shared.message import SessionMessage

logger = logging.getLogger(__name__)

DRAIN_TIMEOUT_SECONDS = 30.0

RequestId = Union[str, int]
IncomingMessage = Union[SessionMessage, Exception]


class InFlightRequests:
    """Set of request ids that have been forwarded but not yet answered."""

    def __init__(self) -> None:
        self._ids: set[RequestId] = set()
        self._idle = anyio.Event()
        self._idle.set()

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, request_id: RequestId) -> None:
        self._ids.add(request_id)
        if self._idle.is_set():
            self._idle = anyio.Event()

    def discard(self, request_id: RequestId) -> None:
        self._ids.discard(request_id)
        if not self._ids:
            self._idle.set()

    async def wait_idle(self) -> None:
        while self._ids:
            await self._idle.wait()


@asynccontextmanager
async def drain_on_eof(
    read_stream: MemoryObjectReceiveStream[IncomingMessage],
    write_stream: MemoryObjectSendStream[SessionMessage],
    drain_timeout: float = DRAIN_TIMEOUT_SECONDS,
) -> AsyncIterator[
    tuple[MemoryObjectReceiveStream[IncomingMessage], MemoryObjectSendStream[SessionMessage]]
]:
    """Yield a (read, write) pair for `Server.run` relaying the given streams.

    Args:
        read_stream: Messages from the transport.
        write_stream: Messages to the transport.
        drain_timeout: Seconds to wait for outstanding responses after the
            transport's input ends.
    """
    in_flight = InFlightRequests()
    relay_send, relay_recv = anyio.create_memory_object_stream[IncomingMessage](0)
    out_send, out_recv = anyio.create_memory_object_stream[SessionMessage](0)

    async def pump_in() -> None:
        async with relay_send, read_stream:
            try:
                async for message in read_stream:
                    if isinstance(message, SessionMessage) and isinstance(
                        message.message.root, types.JSONRPCRequest
                    ):
                        in_flight.add(message.message.root.id)
                    await relay_send.send(message)
            except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                logger.debug("Server stopped reading before end of input")
                return
            logger.debug("End of input, waiting for %d in-flight request(s)", len(in_flight))
            with anyio.move_on_after(drain_timeout) as scope:
                await in_flight.wait_idle()
            if scope.cancelled_caught:
                logger.warning(
                    "Gave up waiting for %d request(s) after %.0fs", len(in_flight), drain_timeout
                )

    async def pump_out() -> None:
        async with out_recv, write_stream:
            async for message in out_recv:
                try:
                    await write_stream.send(message)
                except (anyio.BrokenResourceError, anyio.ClosedResourceError):
                    logger.warning("Transport closed, dropping outgoing message")
                root = message.message.root
                if isinstance(root, (types.JSONRPCResponse, types.JSONRPCError)):
                    in_flight.discard(root.id)

    async with anyio.create_task_group() as tg:
        tg.start_soon(pump_in)
        tg.start_soon(pump_out)
        try:
            yield relay_recv, out_send
        except BaseException:
            tg.cancel_scope.cancel()
            raise
        finally:
            out_send.close()
