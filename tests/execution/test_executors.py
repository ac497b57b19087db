"""Tests for the built-in executors.

Critical Invariants:
- At most one actuator call per execution step
- Out of range means a movement request, in range means the terminal action
- Action codes translate to the documented status transitions
"""

import pytest
from conftest import make_agent, make_task

from taskforce import Action, ActionCode, Position, RecordingActuator, TaskStatus, TaskType
from taskforce.execution import (
    BaseExecutor,
    BuildExecutor,
    DefendExecutor,
    HarvestExecutor,
    PickupExecutor,
    RepairExecutor,
    TransferExecutor,
    UpgradeExecutor,
    WithdrawExecutor,
)

TARGET = Position(10, 10, "W1N1")
ADJACENT = Position(11, 11, "W1N1")
NEAR = Position(13, 10, "W1N1")
FAR = Position(30, 30, "W1N1")


def step(executor, agent, task, actuator):
    result = executor.execute(agent, task, actuator)
    assert len(actuator.calls) <= 1
    return result


def test_out_of_range_requests_movement(actuator):
    agent = make_agent("h", work=2, position=FAR)
    task = make_task(TaskType.HARVEST_ENERGY, "src", position=TARGET)

    result = step(HarvestExecutor(), agent, task, actuator)

    assert result.status is TaskStatus.IN_PROGRESS
    (call,) = actuator.calls
    assert call.action is Action.MOVE_TO
    assert (call.position, call.range) == (TARGET, 1)


@pytest.mark.parametrize("code", [ActionCode.TIRED, ActionCode.BUSY])
def test_stalled_movement_is_progress(actuator, code):
    actuator.set_code(Action.MOVE_TO, code)
    agent = make_agent("h", work=2, position=FAR)
    task = make_task(TaskType.HARVEST_ENERGY, "src", position=TARGET)

    result = step(HarvestExecutor(), agent, task, actuator)

    assert result.status is TaskStatus.IN_PROGRESS


def test_no_path_fails(actuator):
    actuator.set_code(Action.MOVE_TO, ActionCode.NO_PATH)
    agent = make_agent("w", work=1, carry=1, used=10, position=FAR)
    task = make_task(TaskType.BUILD, "site", position=TARGET)

    result = step(BuildExecutor(), agent, task, actuator)

    assert result.status is TaskStatus.FAILED
    assert "no_path" in result.message


def test_upgrade_works_from_three_steps(actuator):
    agent = make_agent("u", work=2, carry=1, used=20, position=NEAR)
    task = make_task(TaskType.UPGRADE_CONTROLLER, "ctrl", position=TARGET)

    result = step(UpgradeExecutor(), agent, task, actuator)

    assert actuator.actions_for("u") == [Action.UPGRADE]
    assert result.status is TaskStatus.IN_PROGRESS
    assert result.work_done == 2


def test_unknown_position_attempts_then_moves_on_not_in_range():
    actuator = RecordingActuator()
    actuator.set_code(Action.BUILD, ActionCode.NOT_IN_RANGE)
    agent = make_agent("w", work=1, carry=1, used=10)
    task = make_task(TaskType.BUILD, "site", position=TARGET)

    result = BuildExecutor().execute(agent, task, actuator)

    assert actuator.actions_for("w") == [Action.BUILD, Action.MOVE_TO]
    assert result.status is TaskStatus.IN_PROGRESS


def test_not_in_range_without_any_position_fails(actuator):
    actuator.set_code(Action.REPAIR, ActionCode.NOT_IN_RANGE)
    agent = make_agent("w", work=1, carry=1, used=10)

    result = step(RepairExecutor(), agent, make_task(TaskType.REPAIR, "road"), actuator)

    assert result.status is TaskStatus.FAILED


@pytest.mark.parametrize(
    ("executor", "task_type", "agent_kwargs", "code", "status"),
    [
        (
            HarvestExecutor(),
            TaskType.HARVEST_ENERGY,
            {"work": 2},
            ActionCode.OK,
            TaskStatus.IN_PROGRESS,
        ),
        (
            HarvestExecutor(),
            TaskType.HARVEST_ENERGY,
            {"work": 2},
            ActionCode.NOT_ENOUGH_RESOURCES,
            TaskStatus.BLOCKED,
        ),
        (
            HarvestExecutor(),
            TaskType.HARVEST_ENERGY,
            {"work": 2},
            ActionCode.NO_BODYPART,
            TaskStatus.FAILED,
        ),
        (
            PickupExecutor(),
            TaskType.PICKUP_ENERGY,
            {"carry": 1},
            ActionCode.INVALID_TARGET,
            TaskStatus.COMPLETED,
        ),
        (
            WithdrawExecutor(),
            TaskType.WITHDRAW_ENERGY,
            {"carry": 1},
            ActionCode.NOT_ENOUGH_RESOURCES,
            TaskStatus.BLOCKED,
        ),
        (
            WithdrawExecutor(),
            TaskType.HAUL_ENERGY,
            {"carry": 1},
            ActionCode.FULL,
            TaskStatus.COMPLETED,
        ),
        (
            TransferExecutor(),
            TaskType.REFILL_SPAWN,
            {"carry": 1, "used": 50},
            ActionCode.FULL,
            TaskStatus.COMPLETED,
        ),
        (
            BuildExecutor(),
            TaskType.BUILD,
            {"work": 1, "carry": 1, "used": 50},
            ActionCode.INVALID_TARGET,
            TaskStatus.FAILED,
        ),
        (
            RepairExecutor(),
            TaskType.REPAIR,
            {"work": 1, "carry": 1, "used": 50},
            ActionCode.FULL,
            TaskStatus.COMPLETED,
        ),
        (
            DefendExecutor(),
            TaskType.DEFEND_ROOM,
            {"fight": 2},
            ActionCode.INVALID_TARGET,
            TaskStatus.COMPLETED,
        ),
        (
            DefendExecutor(),
            TaskType.DEFEND_ROOM,
            {"fight": 2},
            ActionCode.OK,
            TaskStatus.IN_PROGRESS,
        ),
    ],
    ids=[
        "harvest-ok",
        "harvest-source-empty",
        "harvest-no-bodypart",
        "pickup-pile-gone",
        "withdraw-target-empty",
        "haul-agent-full",
        "transfer-target-full",
        "build-site-gone",
        "repair-done",
        "defend-hostile-gone",
        "defend-attacking",
    ],
)
def test_action_code_translation(actuator, executor, task_type, agent_kwargs, code, status):
    agent = make_agent("a", position=ADJACENT, **agent_kwargs)
    task = make_task(task_type, "target", position=TARGET)
    actuator.default = code

    result = step(executor, agent, task, actuator)

    assert result.status is status
    assert actuator.calls[0].target == "target"


@pytest.mark.parametrize(
    ("executor", "task_type", "agent_kwargs"),
    [
        (TransferExecutor(), TaskType.REFILL_EXTENSION, {"carry": 1, "used": 0}),
        (BuildExecutor(), TaskType.BUILD, {"work": 1, "carry": 1, "used": 0}),
        (RepairExecutor(), TaskType.REPAIR, {"work": 1, "carry": 1, "used": 0}),
        (UpgradeExecutor(), TaskType.UPGRADE_CONTROLLER, {"work": 1, "carry": 1, "used": 0}),
        (PickupExecutor(), TaskType.PICKUP_ENERGY, {"carry": 1, "used": 50}),
        (WithdrawExecutor(), TaskType.WITHDRAW_ENERGY, {"carry": 1, "used": 50}),
        (HarvestExecutor(), TaskType.HARVEST_ENERGY, {"work": 1, "carry": 1, "used": 50}),
    ],
    ids=["transfer", "build", "repair", "upgrade", "pickup", "withdraw", "harvest"],
)
def test_resource_state_completes_without_acting(actuator, executor, task_type, agent_kwargs):
    """Empty agents finish delivery work and full agents finish collection work."""
    agent = make_agent("a", position=FAR, **agent_kwargs)

    result = step(executor, agent, make_task(task_type, "target", position=TARGET), actuator)

    assert result.status is TaskStatus.COMPLETED
    assert actuator.calls == []


def test_harvester_without_carry_never_counts_as_full(actuator):
    agent = make_agent("h", work=5, position=ADJACENT)
    task = make_task(TaskType.HARVEST_ENERGY, "src", position=TARGET)

    result = step(HarvestExecutor(), agent, task, actuator)

    assert result.status is TaskStatus.IN_PROGRESS
    assert result.work_done == 10


def test_executor_without_terminal_action_cannot_be_built():
    class NoAction(BaseExecutor):
        action_name = "nothing"

    with pytest.raises(TypeError):
        NoAction()


def test_executor_with_terminal_action_runs(actuator):
    class Pickup(BaseExecutor):
        action_name = "pickup"

        def act(self, agent, task, actuator):
            return actuator.pickup(agent.id, task.target)

    task = make_task(TaskType.PICKUP_ENERGY, "pile")
    result = Pickup().execute(make_agent("p", carry=1), task, actuator)

    assert result.status is TaskStatus.IN_PROGRESS
    assert actuator.actions_for("p") == [Action.PICKUP]
