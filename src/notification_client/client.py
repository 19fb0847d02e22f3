"""Notification dispatch client.

Routes each notification to the provider registered for its channel and
translates provider failures into ValidationError / DeliveryError. The
synchronous ``send`` is the single dispatch primitive; batch and async
entry points are built on top of it.
"""

import logging
import threading
from collections.abc import Iterable, Sequence
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from types import TracebackType
from typing import Self

from notification_client.config import DispatchConfig
from notification_client.errors import DeliveryError, ValidationError
from notification_client.models import Notification
from notification_client.providers import DeliveryProvider, ProviderRegistry

logger = logging.getLogger(__name__)


class NotificationClient:
    """Dispatches notifications synchronously, asynchronously or in batches.

    The provider registry is fixed at construction and only read afterwards,
    so one client can be shared by any number of threads. Async sends run
    on an executor: either one supplied by the caller (left open on
    ``close``) or a thread pool owned by the client.
    """

    def __init__(
        self,
        providers: Iterable[DeliveryProvider] = (),
        *,
        config: DispatchConfig | None = None,
        executor: Executor | None = None,
    ) -> None:
        self._registry = ProviderRegistry(providers)
        self._owns_executor = executor is None
        if executor is None:
            config = config or DispatchConfig()
            executor = ThreadPoolExecutor(
                max_workers=config.max_workers,
                thread_name_prefix=config.thread_name_prefix,
            )
        self._executor = executor
        self._closed = False

    @staticmethod
    def builder() -> "ClientBuilder":
        return ClientBuilder()

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    def send(self, notification: Notification) -> None:
        """Deliver one notification on the calling thread.

        Raises ValidationError when no provider supports the notification
        or the provider rejects it, and DeliveryError for any other
        provider failure.
        """
        provider = self._registry.resolve(notification)
        log_ctx = {
            "channel": notification.channel,
            "notification_type": type(notification).__name__,
            "provider": provider.name,
        }
        logger.debug("Dispatching notification", extra=log_ctx)

        try:
            result = provider.send(notification)
        except ValidationError:
            logger.warning("Provider rejected notification", extra=log_ctx)
            raise
        except Exception as exc:
            logger.exception("Provider error", extra=log_ctx)
            raise DeliveryError(provider.name) from exc

        if result is not None and not result.success:
            logger.error(
                "Provider reported delivery failure",
                extra={**log_ctx, "reason": result.details},
            )
            raise DeliveryError(provider.name)

        logger.info(
            "Delivery succeeded",
            extra={**log_ctx, "result": result.details if result else None},
        )

    def send_all(self, notifications: Iterable[Notification]) -> None:
        """Deliver notifications one by one, in order.

        Stops at the first failure: its error propagates and the remaining
        notifications are not attempted.
        """
        for notification in notifications:
            self.send(notification)

    def send_async(self, notification: Notification) -> Future[None]:
        """Schedule ``send`` on the executor without blocking the caller.

        The returned future carries the ValidationError / DeliveryError
        if delivery fails.
        """
        return self._executor.submit(self._send_in_worker, notification)

    def send_all_async(self, notifications: Iterable[Notification]) -> Future[None]:
        """Schedule every notification at once and return an aggregate future.

        The aggregate completes only after every item has completed. It
        fails with the first failure observed (not necessarily the first
        submitted); the other items still run to completion. An empty
        batch returns an already completed future.
        """
        futures = [self.send_async(notification) for notification in notifications]
        return _gather(futures)

    def close(self, wait: bool = True) -> None:
        """Shut down the client-owned executor. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _send_in_worker(self, notification: Notification) -> None:
        logger.debug(
            "Async send started",
            extra={"worker": threading.current_thread().name},
        )
        self.send(notification)


def _gather(futures: Sequence[Future[None]]) -> Future[None]:
    """Combine futures into one that settles after all of them have settled."""
    combined: Future[None] = Future()
    combined.set_running_or_notify_cancel()
    if not futures:
        combined.set_result(None)
        return combined

    lock = threading.Lock()
    remaining = len(futures)
    first_error: BaseException | None = None

    def _on_done(future: Future[None]) -> None:
        nonlocal remaining, first_error
        error = CancelledError() if future.cancelled() else future.exception()
        with lock:
            if error is not None and first_error is None:
                first_error = error
            remaining -= 1
            if remaining:
                return
        if first_error is not None:
            combined.set_exception(first_error)
        else:
            combined.set_result(None)

    for future in futures:
        future.add_done_callback(_on_done)
    return combined


class ClientBuilder:
    """Collects providers and concurrency settings for a NotificationClient.

    ``build`` takes a snapshot: registering more providers afterwards does
    not affect clients already built. Pool sizing (``with_max_workers``,
    ``with_config``) applies only to the pool the client creates itself;
    combining ``with_max_workers`` with ``with_executor`` is rejected.
    """

    def __init__(self) -> None:
        self._providers: list[DeliveryProvider] = []
        self._executor: Executor | None = None
        self._config: DispatchConfig | None = None
        self._max_workers: int | None = None

    def register_provider(self, provider: DeliveryProvider) -> Self:
        self._providers.append(provider)
        return self

    def with_executor(self, executor: Executor) -> Self:
        self._executor = executor
        return self

    def with_config(self, config: DispatchConfig) -> Self:
        self._config = config
        return self

    def with_max_workers(self, max_workers: int) -> Self:
        if max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self._max_workers = max_workers
        return self

    def build(self) -> NotificationClient:
        if self._executor is not None and self._max_workers is not None:
            raise ValueError(
                "with_max_workers cannot be combined with with_executor; "
                "size the injected executor instead"
            )
        config = self._config
        if self._max_workers is not None:
            base = config or DispatchConfig()
            config = base.model_copy(update={"max_workers": self._max_workers})
        return NotificationClient(
            tuple(self._providers),
            config=config,
            executor=self._executor,
        )
