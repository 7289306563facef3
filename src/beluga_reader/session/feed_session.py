"""Feed session state machine.

Holds the current instance URL, UI state and last loaded document, and
publishes every transition to its observers.
"""

import asyncio
from collections import deque
from collections.abc import Callable
from functools import partial

import structlog

from beluga_reader.client.base import FeedFetcher
from beluga_reader.exceptions import SessionClosedError
from beluga_reader.models.document import Document
from beluga_reader.models.outcome import FetchOutcome, NotFound, Ok
from beluga_reader.session.state import SessionSnapshot, UiState

logger = structlog.get_logger()

Observer = Callable[[SessionSnapshot], None]


class FeedSession:
    """State machine driving feed loads for the presentation layer.

    load() switches to LOADING synchronously and runs the fetch on a
    separate asyncio task. Every load gets a sequence number; a result is
    applied only if it is newer than the last applied one, so a slow
    earlier request never overwrites a newer result.

    Not thread-safe: use it from the event loop thread.
    """

    def __init__(self, fetcher: FeedFetcher, instance_url: str | None = None):
        """Initialize feed session.

        Args:
            fetcher: Fetch-and-decode implementation (usually FeedClient).
            instance_url: Initial instance URL, e.g. a configured default.
        """
        self._fetcher = fetcher
        self._instance_url = instance_url
        self._state = UiState.INITIAL
        self._document: Document | None = None
        self._outcome: FetchOutcome | None = None
        self._observers: list[Observer] = []
        self._pending: deque[SessionSnapshot] = deque()
        self._publishing = False
        self._tasks: set[asyncio.Task] = set()
        self._issued_seq = 0
        self._applied_seq = 0
        self._closed = False

    @property
    def state(self) -> UiState:
        """Current UI state."""
        return self._state

    @property
    def document(self) -> Document | None:
        """Last successfully loaded document."""
        return self._document

    @property
    def instance_url(self) -> str | None:
        """URL of the most recent load() call."""
        return self._instance_url

    @property
    def last_outcome(self) -> FetchOutcome | None:
        """Outcome behind the current state."""
        return self._outcome

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def snapshot(self) -> SessionSnapshot:
        """Current state, document, URL and outcome as one immutable value."""
        return SessionSnapshot(
            state=self._state,
            document=self._document,
            instance_url=self._instance_url,
            outcome=self._outcome,
        )

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer for future transitions.

        The observer is not called with the current snapshot; read
        ``snapshot`` for that.

        Args:
            observer: Callable receiving a SessionSnapshot per transition.

        Returns:
            Callable that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def load(self, url: str) -> asyncio.Task:
        """Start loading the feed of an instance.

        The LOADING transition is published before this method returns.
        Calls made while a load is in flight are accepted; the earlier
        request is not cancelled. Cancelling the returned task of the newest
        load moves the session to FAILED; cancelling an older one changes
        nothing.

        Args:
            url: Instance URL, without a trailing slash.

        Returns:
            The task running the fetch. Awaiting it is optional.

        Raises:
            SessionClosedError: If the session has been closed.
            RuntimeError: If called without a running event loop.
        """
        if self._closed:
            raise SessionClosedError("Cannot load on a closed session")

        loop = asyncio.get_running_loop()

        self._issued_seq += 1
        seq = self._issued_seq
        self._instance_url = url
        self._outcome = None
        self._transition(UiState.LOADING)

        task = loop.create_task(self._run(seq, url))
        self._tasks.add(task)
        task.add_done_callback(partial(self._on_task_done, seq))
        return task

    async def wait_idle(self) -> None:
        """Wait until every in-flight load has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear the session down.

        Observers are dropped and results arriving afterwards are
        discarded. In-flight requests are left to finish on their own.
        """
        if self._closed:
            return
        self._closed = True
        self._observers.clear()
        logger.debug("Feed session closed", pending=len(self._tasks))

    async def _run(self, seq: int, url: str) -> None:
        """Fetch one instance and apply the result if it is still current."""
        log = logger.bind(url=url, seq=seq)

        try:
            outcome = await self._fetcher.fetch(url)
        except Exception:
            log.exception("Feed fetch raised unexpectedly")
            if self._accept(seq, log):
                self._outcome = None
                self._transition(UiState.FAILED)
            raise

        if self._accept(seq, log):
            self._apply(outcome)

    def _on_task_done(self, seq: int, task: asyncio.Task) -> None:
        self._tasks.discard(task)

        if task.cancelled():
            # Only the newest unanswered load may leave LOADING behind
            if not self._closed and seq == self._issued_seq and seq > self._applied_seq:
                logger.info("Feed load cancelled", seq=seq, url=self._instance_url)
                self._applied_seq = seq
                self._outcome = None
                self._transition(UiState.FAILED)
            return

        # Already logged in _run; retrieving it stops asyncio reporting it again
        task.exception()

    def _accept(self, seq: int, log: structlog.typing.FilteringBoundLogger) -> bool:
        """Decide whether the result of request ``seq`` may be applied."""
        if self._closed:
            log.debug("Discarding result of closed session")
            return False
        if seq <= self._applied_seq:
            log.info("Discarding stale result", applied_seq=self._applied_seq)
            return False
        self._applied_seq = seq
        return True

    def _apply(self, outcome: FetchOutcome) -> None:
        # Document and state change together; failures keep the old document
        if isinstance(outcome, Ok):
            self._document = outcome.document
            state = UiState.SUCCESS
        elif isinstance(outcome, NotFound):
            state = UiState.NOT_FOUND
        else:
            state = UiState.FAILED

        self._outcome = outcome
        self._transition(state)

    def _transition(self, state: UiState) -> None:
        self._state = state
        self._pending.append(self.snapshot)
        logger.debug("Session state changed", state=state.value, url=self._instance_url)

        # An observer may call load() while being notified; the outermost
        # call drains the queue so every observer sees snapshots in order
        if self._publishing:
            return
        self._publishing = True
        try:
            while self._pending:
                snapshot = self._pending.popleft()
                for observer in list(self._observers):
                    try:
                        observer(snapshot)
                    except Exception as e:
                        logger.warning("Session observer failed", error=str(e))
        finally:
            self._publishing = False
