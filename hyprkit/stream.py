"""Hyprland event stream (`.socket2.sock`).

Usage::

    async with EventStream() as stream:
        async for item in stream:
            if isinstance(item, HyprkitError):
                ...  # decode or read problem for one line, the stream goes on
            else:
                ...  # an Event

A reader task fills a bounded queue; it waits while the queue is full, so a slow
consumer slows down the socket reads and no decoded event is dropped.
"""

__all__ = ["EventStream"]

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator, Mapping
from contextlib import aclosing
from logging import Logger
from types import TracebackType
from typing import Final, Self

from .decoder import decode_line
from .errors import ConfigurationError, DecodeError, HyprkitError, IpcIOError, SocketConnectionError
from .events import Event
from .ipc_paths import SocketPaths, resolve_socket_paths
from .logging_setup import get_logger

DEFAULT_QUEUE_SIZE = 4

_END: Final = object()

StreamItem = Event | HyprkitError


class EventStream:
    """Single-use subscription to Hyprland events.

    Args:
        paths: socket locations, resolved from `environ` when omitted
        maxsize: capacity of the queue between the socket reader and the consumer
        environ: environment used to resolve the paths (defaults to `os.environ`)
        logger: logger to use (defaults to the "events" logger)
    """

    def __init__(
        self,
        paths: SocketPaths | None = None,
        *,
        maxsize: int = DEFAULT_QUEUE_SIZE,
        environ: Mapping[str, str] | None = None,
        logger: Logger | None = None,
    ) -> None:
        if maxsize < 1:
            msg = "maxsize must be at least 1"
            raise ValueError(msg)
        self._paths = paths
        self._environ = environ
        self._maxsize = maxsize
        self._items: AsyncGenerator[StreamItem, None] | None = None
        self.log = logger or get_logger("events")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None) -> None:
        await self.aclose()

    def __aiter__(self) -> AsyncIterator[StreamItem]:
        return self.listen()

    def listen(self) -> AsyncGenerator[StreamItem, None]:
        """Return the (endless) sequence of events and per-line errors.

        Errors are yielded, not raised. A connection failure yields a single
        `ConfigurationError` or `SocketConnectionError` and ends the sequence.

        Raises:
            RuntimeError: the stream was already listened to
        """
        if self._items is not None:
            msg = "EventStream can only be listened to once"
            raise RuntimeError(msg)
        self._items = self._consume()
        return self._items

    async def events(self) -> AsyncIterator[Event]:
        """Iterate over events only, logging per-line errors.

        Raises:
            ConfigurationError: HYPRLAND_INSTANCE_SIGNATURE is not set
            SocketConnectionError: the event socket cannot be opened
        """
        async with aclosing(self.listen()) as items:
            async for item in items:
                if isinstance(item, ConfigurationError | SocketConnectionError):
                    raise item
                if isinstance(item, HyprkitError):
                    self.log.warning("Invalid event: %s", item)
                    continue
                yield item

    async def aclose(self) -> None:
        """Stop reading and close the socket."""
        if self._items is not None:
            await self._items.aclose()

    async def _consume(self) -> AsyncGenerator[StreamItem, None]:
        queue: asyncio.Queue[object] = asyncio.Queue(self._maxsize)
        producer = asyncio.create_task(self._produce(queue), name="hyprkit-events")
        try:
            while True:
                item = await queue.get()
                if item is _END:
                    return
                yield item  # type: ignore[misc]
        finally:
            producer.cancel()
            await asyncio.wait([producer])

    async def _produce(self, queue: asyncio.Queue[object]) -> None:
        try:
            await self._read_events(queue)
        except Exception as e:
            self.log.exception("Aborting event loop")
            error = IpcIOError(f"event loop aborted: {e!r}")
            error.__cause__ = e
            await queue.put(error)
        await queue.put(_END)

    async def _open(self) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        paths = self._paths or resolve_socket_paths(self._environ)
        try:
            return await asyncio.open_unix_connection(str(paths.events))
        except OSError as e:
            self.log.critical("Failed to open hyprland event stream: %s", e)
            raise SocketConnectionError(str(paths.events), str(e)) from e

    async def _read_events(self, queue: asyncio.Queue[object]) -> None:
        try:
            reader, writer = await self._open()
        except (ConfigurationError, SocketConnectionError) as e:
            await queue.put(e)
            return

        try:
            while True:
                try:
                    raw = await reader.readline()
                except ConnectionError as e:
                    await queue.put(IpcIOError(f"event socket lost: {e}"))
                    return
                except (OSError, ValueError) as e:
                    # ValueError: line longer than the reader limit, the line is dropped
                    await queue.put(IpcIOError(f"failed to read event: {e}"))
                    continue
                if not raw:
                    self.log.critical("Reader starved")
                    await queue.put(IpcIOError("event socket closed by compositor"))
                    return

                try:
                    event = decode_line(raw.decode("utf-8"))
                except UnicodeDecodeError as e:
                    await queue.put(IpcIOError(f"invalid unicode while reading events: {e}"))
                    continue
                except DecodeError as e:
                    await queue.put(e)
                    continue

                if event is None:
                    self.log.debug("legacy event ignored: %s", raw)
                    continue
                await queue.put(event)
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                self.log.debug("error while closing the event socket", exc_info=True)
