"""
Periodic publish/subscribe registry for dashboard metric streams.

The first handler on a stream gets a sample immediately, then a repeating
asyncio timer re-runs the stream's generator every ``tick_interval`` seconds
and fans the payload out to every current handler. Removing the last handler
cancels that stream's timer.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from models.enums import MetricStream
from models.errors import UnknownStreamError
from utils.data_generation import MetricDataGenerator

logger_streams = logging.getLogger(__name__)

Handler = Callable[[Any], None]


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__name__", type(handler).__name__)


class MetricStreamRegistry:
    """Schedules named generators and fans their output out to handlers."""

    def __init__(
        self,
        generators: Mapping[MetricStream, Callable[[], Any]] | None = None,
        tick_interval: float = 5.0,
    ):
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        self.generators: dict[MetricStream, Callable[[], Any]] = dict(
            generators if generators is not None else MetricDataGenerator().generators()
        )
        self.tick_interval = tick_interval
        self.subscribers: dict[MetricStream, list[Handler]] = {}
        self.timers: dict[MetricStream, asyncio.Task] = {}

    def _resolve(self, stream: MetricStream | str) -> MetricStream:
        try:
            resolved = MetricStream(stream)
        except ValueError:
            raise UnknownStreamError(stream) from None
        if resolved not in self.generators:
            raise UnknownStreamError(stream)
        return resolved

    def subscribe(self, stream: MetricStream | str, handler: Handler) -> None:
        """
        Register ``handler`` for ``stream``.

        The first handler on a stream triggers one synchronous delivery and
        arms the repeating timer, so this must be called while an event loop
        is running. If the stream's generator fails during that first
        delivery, the subscription is rolled back and the error propagates.
        """
        if not callable(handler):
            raise TypeError("Handler must be callable.")
        stream = self._resolve(stream)
        handlers = self.subscribers.get(stream, [])
        if any(existing is handler for existing in handlers):
            logger_streams.warning(
                f"Handler {_handler_name(handler)} already subscribed to {stream.value}"
            )
            return
        # Raises RuntimeError outside a running loop, before any state changes
        loop = asyncio.get_running_loop() if stream not in self.timers else None

        self.subscribers.setdefault(stream, []).append(handler)
        logger_streams.debug(f"Handler {_handler_name(handler)} subscribed to {stream.value}")

        if loop is not None:
            try:
                self._start(stream, loop)
            except Exception:
                self._rollback(stream, handler)
                raise

    def unsubscribe(self, stream: MetricStream | str, handler: Handler) -> None:
        """Remove ``handler`` (by identity); the last removal stops the stream."""
        stream = self._resolve(stream)
        handlers = self.subscribers.get(stream, [])
        for index, existing in enumerate(handlers):
            if existing is handler:
                del handlers[index]
                logger_streams.debug(
                    f"Handler {_handler_name(handler)} unsubscribed from {stream.value}"
                )
                break
        else:
            logger_streams.warning(
                f"Handler {_handler_name(handler)} not found for stream {stream.value}"
            )
            return

        if not handlers:
            del self.subscribers[stream]
            self._stop(stream)

    def publish(self, stream: MetricStream | str) -> Any:
        """
        Run the stream's generator once and deliver the payload to a snapshot
        of the current handlers. A failing handler is logged and skipped.
        Returns the payload, or None when nobody is subscribed.
        """
        stream = self._resolve(stream)
        handlers = list(self.subscribers.get(stream, ()))
        if not handlers:
            return None

        payload = self.generators[stream]()
        for handler in handlers:
            try:
                handler(payload)
            except Exception as e:
                logger_streams.error(
                    f"Error in handler '{_handler_name(handler)}' for stream {stream.value}: {e}",
                    exc_info=False,
                )
        return payload

    def handler_count(self, stream: MetricStream | str) -> int:
        return len(self.subscribers.get(self._resolve(stream), ()))

    def active_streams(self) -> list[MetricStream]:
        return list(self.timers)

    async def close(self) -> None:
        """Cancel every timer and drop every handler."""
        tasks = list(self.timers.values())
        for stream in list(self.timers):
            self._stop(stream)
        self.subscribers.clear()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _start(self, stream: MetricStream, loop: asyncio.AbstractEventLoop) -> None:
        # Arm first: a handler subscribing during the initial delivery must
        # not start a second timer, and one unsubscribing must cancel this one.
        self.timers[stream] = loop.create_task(
            self._run_timer(stream), name=f"metric-stream-{stream.value}"
        )
        logger_streams.info(
            f"Started stream {stream.value} (every {self.tick_interval}s)"
        )
        self.publish(stream)

    def _rollback(self, stream: MetricStream, handler: Handler) -> None:
        handlers = self.subscribers.get(stream, [])
        handlers[:] = [existing for existing in handlers if existing is not handler]
        if not handlers:
            self.subscribers.pop(stream, None)
            self._stop(stream)
        logger_streams.error(
            f"Initial delivery for stream {stream.value} failed; "
            f"handler {_handler_name(handler)} not subscribed"
        )

    def _stop(self, stream: MetricStream) -> None:
        task = self.timers.pop(stream, None)
        if task is not None:
            task.cancel()
            logger_streams.info(f"Stopped stream {stream.value}")

    async def _run_timer(self, stream: MetricStream) -> None:
        try:
            while True:
                await asyncio.sleep(self.tick_interval)
                try:
                    self.publish(stream)
                except Exception as e:
                    logger_streams.error(
                        f"Error generating tick for stream {stream.value}: {e}",
                        exc_info=True,
                    )
        except asyncio.CancelledError:
            logger_streams.debug(f"Timer for stream {stream.value} cancelled")
            raise
