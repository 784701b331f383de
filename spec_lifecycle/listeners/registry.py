"""Run-scoped registry of lifecycle listeners."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import Lock

from spec_lifecycle.listeners.base import TestListener
from spec_lifecycle.listeners.dispatcher import ListenerDispatcher, ListenerFailure
from spec_lifecycle.listeners.errors import DuplicateListenerError, RegistryClosedError

log = logging.getLogger(__name__)


class ListenerRegistry:
    """Listeners registered by an engine for a single run.

    Listeners are collected before the run and dispatched to in registration
    order. Once ``run()`` starts the registry is closed: it cannot accept new
    listeners or start another run.
    """

    def __init__(self) -> None:
        self._listeners: list[TestListener] = []
        self._closed = False
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._listeners)

    @property
    def listeners(self) -> tuple[TestListener, ...]:
        with self._lock:
            return tuple(self._listeners)

    @property
    def closed(self) -> bool:
        return self._closed

    def register(self, listener: TestListener) -> None:
        """Add a listener after the ones already registered.

        Raises:
            TypeError: If ``listener`` is not a TestListener
            DuplicateListenerError: If the instance is already registered
            RegistryClosedError: If the run has already started

        """
        if not isinstance(listener, TestListener):
            raise TypeError(
                f"Listener must be a TestListener, got {type(listener).__name__}"
            )

        with self._lock:
            if self._closed:
                raise RegistryClosedError(
                    "Cannot register listeners once the run has started"
                )
            if any(registered is listener for registered in self._listeners):
                raise DuplicateListenerError(
                    f"Listener {listener!r} is already registered"
                )
            self._listeners.append(listener)

        log.debug("Registered listener %s", type(listener).__qualname__)

    @contextmanager
    def run(
        self, on_failure: Callable[[ListenerFailure], None] | None = None
    ) -> Iterator[ListenerDispatcher]:
        """Bracket a run with ``project_started`` and ``project_finished``.

        Yields the dispatcher the engine notifies for everything in between.
        ``project_finished`` fires even when the run body raises.

        Raises:
            RegistryClosedError: If the registry was already used for a run

        """
        with self._lock:
            if self._closed:
                raise RegistryClosedError("Registry has already been used for a run")
            self._closed = True
            dispatcher = ListenerDispatcher(
                listeners=tuple(self._listeners), on_failure=on_failure
            )

        log.info("Starting run with %d listener(s)", len(dispatcher.listeners))
        dispatcher.project_started()
        try:
            yield dispatcher
        finally:
            dispatcher.project_finished()
            log.info("Run finished")
