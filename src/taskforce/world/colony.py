"""Colony: per-zone coordinator running the four scheduling phases.

Usage:
    colony = Colony("W1N1", actuator)

    # Once per cycle
    report = colony.run_cycle(snapshot, agents)
    report.to_dict()  # reconciled tasks, assignments, results

    # With history recording
    colony = Colony("W1N1", actuator, history=InMemoryHistoryStore())
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from taskforce.core.agent import Agent, index_agents
from taskforce.core.task import Task
from taskforce.core.types import AgentId
from taskforce.execution import LifecycleController
from taskforce.generation import TaskGenerator
from taskforce.observability import bind_cycle_context, clear_cycle_context, get_logger
from taskforce.scheduling import AssignmentEngine, TaskReconciler
from taskforce.tracing import TickRecord
from taskforce.world.result import CycleReport

if TYPE_CHECKING:
    from taskforce.adapters import Actuator
    from taskforce.generation import ZoneSnapshot
    from taskforce.tracing import HistoryStore

logger = get_logger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class Colony:
    """Single scheduling authority for one operating zone.

    Each cycle runs Generator -> Reconciler -> Assignment Engine -> Lifecycle
    Controller. The reconciled task list is the only state carried between
    cycles.

    Args:
        zone: Operating zone this colony schedules.
        actuator: External actuation layer.
        generator: Task generator. Defaults to TaskGenerator().
        reconciler: Task reconciler. Defaults to TaskReconciler().
        engine: Assignment engine, shared with the default lifecycle controller.
        lifecycle: Lifecycle controller. Defaults to one built on actuator and engine.
        history: Optional store receiving one TickRecord per cycle.
    """

    def __init__(
        self,
        zone: str,
        actuator: Actuator,
        generator: TaskGenerator | None = None,
        reconciler: TaskReconciler | None = None,
        engine: AssignmentEngine | None = None,
        lifecycle: LifecycleController | None = None,
        history: HistoryStore | None = None,
    ) -> None:
        self.zone = zone
        self._generator = generator or TaskGenerator()
        self._reconciler = reconciler or TaskReconciler()
        self._engine = engine or AssignmentEngine()
        self._lifecycle = lifecycle or LifecycleController(actuator, engine=self._engine)
        self._history = history
        self._tasks: list[Task] = []
        self._cycles = 0

    @property
    def tasks(self) -> list[Task]:
        """Reconciled task list from the last cycle."""
        return list(self._tasks)

    @property
    def cycles(self) -> int:
        """Number of cycles run."""
        return self._cycles

    def run_cycle(
        self,
        snapshot: ZoneSnapshot,
        agents: Iterable[Agent] | Mapping[AgentId, Agent],
    ) -> CycleReport:
        """Run one full scheduling cycle.

        Args:
            snapshot: This cycle's observation of the zone.
            agents: Live agents in the zone. Assignments are mutated.

        Returns:
            CycleReport describing every decision made.

        Raises:
            ValueError: If the snapshot belongs to another zone, or agent ids repeat.
        """
        if snapshot.zone != self.zone:
            raise ValueError(f"Snapshot for zone {snapshot.zone!r} given to colony {self.zone!r}")

        live = index_agents(agents)
        bind_cycle_context(self.zone, snapshot.tick)
        try:
            timings: dict[str, float] = {}

            start = time.perf_counter()
            generated = self._generator.generate(snapshot)
            timings["generate"] = _elapsed_ms(start)

            start = time.perf_counter()
            reconciled = self._reconciler.reconcile(generated, self._tasks, live)
            timings["reconcile"] = _elapsed_ms(start)

            start = time.perf_counter()
            assignment = self._engine.assign(reconciled.tasks, live)
            timings["assign"] = _elapsed_ms(start)

            start = time.perf_counter()
            lifecycle = self._lifecycle.run(reconciled.tasks, live)
            timings["execute"] = _elapsed_ms(start)

            self._tasks = reconciled.tasks
            self._cycles += 1

            report = CycleReport(
                tick=snapshot.tick,
                zone=self.zone,
                tasks=reconciled.tasks,
                reconcile=reconciled,
                assignment=assignment,
                lifecycle=lifecycle,
                phase_timings=timings,
            )
            logger.info(
                "cycle.completed",
                tasks=len(report.tasks),
                assigned=len(assignment.assigned),
                released=len(lifecycle.released),
            )
            if self._history is not None:
                self._history.record_tick(
                    TickRecord(
                        tick=snapshot.tick,
                        zone=self.zone,
                        timestamp=time.time(),
                        snapshot=report.task_snapshot(),
                        events=report.events(),
                        phase_timings=dict(timings),
                    )
                )
            return report
        finally:
            clear_cycle_context()
