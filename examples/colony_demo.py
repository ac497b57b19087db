"""Colony scheduling walkthrough.

Demonstrates:
- Building a zone snapshot from observed facts
- Running cycles through Colony with a recording actuator
- Rosters carried across cycles and agents released on completion
- Defense preempting the economy when hostiles appear
- Reading history from an in-memory store
"""

from taskforce import (
    Action,
    ActionCode,
    Agent,
    Capability,
    Colony,
    InMemoryHistoryStore,
    LoggingSettings,
    RecordingActuator,
    ResourceState,
    Role,
    ZoneSnapshot,
    setup_logging,
)
from taskforce.generation import (
    ConstructionSiteReport,
    ControllerReport,
    HostileReport,
    PositionReport,
    SourceReport,
    SpawnReport,
)

RAIDER_BODY = ["attack", "attack", "move"]


def make_agents() -> list[Agent]:
    return [
        Agent(
            id="harvester-1",
            capabilities={Capability.WORK: 5, Capability.MOVE: 1},
            role=Role.HARVESTER,
        ),
        Agent(
            id="hauler-1",
            capabilities={Capability.CARRY: 4, Capability.MOVE: 2},
            resource=ResourceState(used=200, capacity=200),
            role=Role.HAULER,
        ),
        Agent(
            id="worker-1",
            capabilities={Capability.WORK: 2, Capability.CARRY: 2, Capability.MOVE: 2},
            resource=ResourceState(used=100, capacity=100),
        ),
        Agent(
            id="defender-1",
            capabilities={Capability.FIGHT: 3, Capability.MOVE: 3},
            role=Role.DEFENDER,
        ),
    ]


def snapshot(tick: int, *, hostile: bool = False) -> ZoneSnapshot:
    return ZoneSnapshot(
        zone="W1N1",
        tick=tick,
        energy_available=150,
        energy_capacity_available=300,
        shortest_ticks_to_live=1400,
        sources=[
            SourceReport(id="src-1", pos=PositionReport(x=10, y=12), energy=3000, harvest_slots=2)
        ],
        spawns=[
            SpawnReport(
                id="spawn-1", pos=PositionReport(x=25, y=25), energy=150, energy_capacity=300
            )
        ],
        construction_sites=[
            ConstructionSiteReport(
                id="site-1",
                pos=PositionReport(x=20, y=22),
                structure_type="extension",
                progress=1200,
                progress_total=3000,
            )
        ],
        controller=ControllerReport(
            id="ctrl", pos=PositionReport(x=30, y=8), level=2, ticks_to_downgrade=4200
        ),
        hostiles=(
            [HostileReport(id="raider", pos=PositionReport(x=2, y=2), body=RAIDER_BODY)]
            if hostile
            else []
        ),
    )


def main() -> None:
    setup_logging(LoggingSettings(level="INFO", format="console"))

    actuator = RecordingActuator()
    history = InMemoryHistoryStore(max_ticks=100)
    colony = Colony("W1N1", actuator, history=history)
    agents = make_agents()

    # Tick 1: plain economy
    report = colony.run_cycle(snapshot(1), agents)
    print(f"Tick 1: {len(report.tasks)} tasks")
    for agent in agents:
        print(f"  {agent.id} -> {agent.assignment}")

    # Tick 2: the spawn fills up, so the hauler completes and is released
    actuator.set_code(Action.TRANSFER, ActionCode.FULL)
    report = colony.run_cycle(snapshot(2), agents)
    print(f"Tick 2: released {report.lifecycle.released}")

    # Tick 3: a hostile appears and the defender picks it up first
    actuator.set_code(Action.TRANSFER, ActionCode.OK)
    report = colony.run_cycle(snapshot(3, hostile=True), agents)
    assigned = {agent_id: str(task_id) for agent_id, task_id in report.assignment.assigned.items()}
    print(f"Tick 3: assigned {assigned}")

    tick_range = history.get_tick_range()
    print(f"History ticks: {tick_range}")
    for event in history.get_events(1, 3):
        print(f"  {event}")


if __name__ == "__main__":
    main()
