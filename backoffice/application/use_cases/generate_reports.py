"""ReportService: background ledger report runs with per-scope progress state."""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import aclosing
from collections.abc import Callable

from backoffice.application.ports.ledger_storage import LedgerStorage
from backoffice.domain.entities.process_state import ProcessState
from backoffice.domain.errors import MalformedLedgerLineError
from backoffice.domain.reports.aggregators import aggregator_for
from backoffice.domain.reports.ledger import parse_ledger_line
from backoffice.domain.value_objects.enums import ProcessStatus, ReportScope

logger = logging.getLogger(__name__)

StateListener = Callable[[ProcessState], None]


class ReportService:
    """Owns the progress state of every report scope and the runs that update it.

    One instance lives for the whole process. A scope has at most one run in
    flight: ``start`` flips the status to processing before handing the run to
    the event loop, so a second ``start`` in between always sees it. Runs are
    never cancelled; failures end up in the scope's state, not in the caller.
    """

    def __init__(self, storage: LedgerStorage):
        self._storage = storage
        self._states: dict[ReportScope, ProcessState] = {
            scope: ProcessState() for scope in ReportScope
        }
        self._listeners: dict[ReportScope, list[StateListener]] = {
            scope: [] for scope in ReportScope
        }
        self._tasks: dict[ReportScope, asyncio.Task] = {}

    # ─── State ───────────────────────────────────────────────────────

    def state(self, scope: ReportScope | str) -> ProcessState:
        return self._states[ReportScope(scope)]

    def states(self) -> dict[str, ProcessState]:
        """All scopes keyed by their output file name."""
        return {scope.output_name: self._states[scope] for scope in ReportScope}

    def subscribe(self, scope: ReportScope | str, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot on every state change of ``scope``.

        Returns a function that removes the listener again.
        """
        listeners = self._listeners[ReportScope(scope)]
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def _update(self, scope: ReportScope, **changes) -> None:
        state = self._states[scope]
        for name, value in changes.items():
            setattr(state, name, value)

        snapshot = state.snapshot()
        for listener in list(self._listeners[scope]):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener for %s failed", scope.value)

    # ─── Runs ────────────────────────────────────────────────────────

    def start(self, scope: ReportScope | str) -> ProcessState:
        """Start a run for ``scope`` unless one is already in flight.

        Returns a snapshot of the scope's state right after the call: the
        fresh processing state, or the unchanged state of the running job.
        Must be called from within a running event loop.
        """
        scope = ReportScope(scope)
        state = self._states[scope]
        if state.is_processing():
            logger.info("Report %s already processing, not starting another run", scope.value)
            return state.snapshot()

        self._update(
            scope,
            status=ProcessStatus.PROCESSING,
            progress=0,
            processed_files=0,
            total_files=None,
            duration=None,
            error=None,
        )
        task = asyncio.create_task(self._run(scope), name=f"report-{scope.value}")
        self._tasks[scope] = task
        task.add_done_callback(lambda t: self._forget(scope, t))
        return state.snapshot()

    def start_all(self) -> dict[str, ProcessState]:
        return {scope.output_name: self.start(scope) for scope in ReportScope}

    async def wait(self, scope: ReportScope | str) -> ProcessState:
        """Wait for the scope's current run, if any, and return its state."""
        scope = ReportScope(scope)
        task = self._tasks.get(scope)
        if task is not None:
            await task
        return self._states[scope]

    async def drain(self) -> None:
        """Wait for every run in flight."""
        tasks = list(self._tasks.values())
        if tasks:
            logger.info("Waiting for %d report runs to finish", len(tasks))
            await asyncio.gather(*tasks)

    def _forget(self, scope: ReportScope, task: asyncio.Task) -> None:
        if self._tasks.get(scope) is task:
            del self._tasks[scope]

    async def _run(self, scope: ReportScope) -> None:
        started = time.perf_counter()
        aggregator = aggregator_for(scope)
        try:
            files = [name for name in await self._storage.list_files() if aggregator.accepts(name)]
            self._update(scope, total_files=len(files), processed_files=0)
            logger.info("Report %s started: %d input files", scope.value, len(files))

            for processed, file_name in enumerate(files, start=1):
                async with aclosing(self._storage.read_lines(file_name)) as lines:
                    async for line in lines:
                        try:
                            entry = parse_ledger_line(line)
                            if entry is not None:
                                aggregator.consume(entry)
                        except MalformedLedgerLineError as e:
                            raise MalformedLedgerLineError(f"{file_name}: {e}") from e

                self._update(
                    scope,
                    processed_files=processed,
                    progress=processed / len(files) * 100,
                )
                logger.debug("Report %s: processed %s (%d/%d)", scope.value, file_name, processed, len(files))

            await self._storage.write_report(scope.output_name, aggregator.render())

            duration = round(time.perf_counter() - started, 2)
            self._update(scope, status=ProcessStatus.COMPLETED, progress=100, duration=duration)
            logger.info("Report %s completed in %.2fs", scope.value, duration)

        except Exception as e:
            logger.exception("Report %s failed", scope.value)
            self._update(
                scope,
                status=ProcessStatus.ERROR,
                error=str(e) or f"An error occurred while processing {scope.value} report",
            )
