"""Stopwatch for timed reading sessions."""

import asyncio
import logging
from collections.abc import Callable

from reading_tracker.errors import ValidationError
from reading_tracker.models import Book, ReadingSession
from reading_tracker.stats.pace import WORDS_PER_PAGE, format_duration, session_wpm
from reading_tracker.validation import (
    validate_duration,
    validate_session_pages,
    validate_start_page,
)

logger = logging.getLogger(__name__)


class ReadingTimer:
    """Counts whole seconds while the reader is reading a book.

    The count advances by one on every tick. ``start`` schedules a tick every
    ``interval`` seconds on the running event loop, always cancelling the
    previous tick task first so that only one is ever active. Pass
    ``auto_tick=False`` to drive ``tick`` by hand instead.

    Args:
        book: The book being read; bounds the start and end pages.
        interval: Seconds between ticks.
        words_per_page: Density used for the session's WPM.
        on_tick: Called with the elapsed seconds after every tick.
    """

    def __init__(
        self,
        book: Book,
        interval: float = 1.0,
        words_per_page: int = WORDS_PER_PAGE,
        on_tick: Callable[[int], None] | None = None,
    ) -> None:
        self._book = book
        self._interval = interval
        self._words_per_page = words_per_page
        self._on_tick = on_tick
        self._elapsed = 0
        self._start_page: int | None = None
        self._running = False
        self._task: asyncio.Task[None] | None = None

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def display(self) -> str:
        return format_duration(self._elapsed)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def start_page(self) -> int | None:
        return self._start_page

    def start(self, start_page: int, auto_tick: bool = True) -> None:
        """Begin timing from ``start_page``.

        Raises:
            ValidationError: If the start page is outside the book.
            RuntimeError: If ``auto_tick`` is set and no event loop is running.
        """
        validate_start_page(self._book, start_page)
        loop = asyncio.get_running_loop() if auto_tick else None
        self._cancel_ticks()
        self._start_page = start_page
        self._running = True
        if loop is not None:
            self._task = loop.create_task(self._tick_forever())
        logger.debug("Timer started on page %d of book %s", start_page, self._book.id)

    def tick(self) -> None:
        if not self._running:
            return
        self._elapsed += 1
        if self._on_tick is not None:
            self._on_tick(self._elapsed)

    def stop(self, end_page: int) -> ReadingSession:
        """Stop timing at ``end_page`` and build the finished session.

        The timer keeps running when the input is rejected.

        Returns:
            An unsaved ReadingSession carrying the measured WPM.

        Raises:
            ValidationError: If the timer was never started, the pages are out
                of range or no time elapsed.
        """
        if self._start_page is None:
            raise ValidationError("Start the timer before finishing the session.")
        validate_session_pages(self._book, self._start_page, end_page)
        validate_duration(self._elapsed)

        self._cancel_ticks()
        self._running = False
        wpm = session_wpm(
            self._start_page, end_page, self._elapsed, self._words_per_page
        )
        return ReadingSession(
            book_id=self._book.id,
            start_page=self._start_page,
            end_page=end_page,
            duration=self._elapsed,
            wpm=wpm,
        )

    def pause(self) -> None:
        self._cancel_ticks()
        self._running = False

    def reset(self) -> None:
        self._cancel_ticks()
        self._running = False
        self._elapsed = 0
        self._start_page = None

    async def _tick_forever(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.tick()

    def _cancel_ticks(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
