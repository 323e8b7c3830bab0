"""Tests for the Action / Task helpers returned by update functions."""

from receipts.action import Action, Task


def test_task_none_runs_nothing():
    t = Task.none()
    assert t.is_none()
    assert t.run() == []


def test_task_done_and_chain_keep_order():
    t = Task.done("a").chain(Task.done("b")).chain(Task.none())
    assert len(t) == 2
    assert t.run() == ["a", "b"]


def test_task_effect_runs_but_yields_no_message():
    calls = []
    t = Task.effect(lambda: calls.append("ran"))
    assert t.run() == []
    assert calls == ["ran"]


def test_task_perform_with_and_without_mapping():
    assert Task.perform(lambda: 21, lambda v: v * 2).run() == [42]
    assert Task.perform(lambda: "x").run() == ["x"]
    assert Task.perform(lambda: None).run() == []


def test_task_map_skips_empty_results():
    t = Task.batch(Task.done(1), Task.effect(lambda: None), Task.done(2)).map(lambda v: v * 10)
    assert t.run() == [10, 20]


def test_task_steps_are_deferred_until_run():
    calls = []
    t = Task.effect(lambda: calls.append(1))
    t.map(str)
    assert calls == []


def test_action_constructors():
    assert Action.none().operation is None
    assert Action.none().task.is_none()

    a = Action.from_operation("back")
    assert a.operation == "back" and a.task.is_none()

    b = Action.from_task(Task.done("m"))
    assert b.operation is None and b.task.run() == ["m"]

    c = Action.new("save", Task.done("m"))
    assert c.operation == "save" and c.task.run() == ["m"]


def test_action_map_and_map_operation_are_independent():
    a = Action.new("back", Task.done("child"))

    mapped = a.map(lambda msg: ("parent", msg))
    assert mapped.operation == "back"
    assert mapped.task.run() == [("parent", "child")]

    op_mapped = a.map_operation(lambda op: op.upper())
    assert op_mapped.operation == "BACK"
    assert op_mapped.task.run() == ["child"]


def test_action_map_operation_on_empty_operation_stays_empty():
    calls = []
    a = Action.from_task(Task.done(1)).map_operation(lambda op: calls.append(op))
    assert a.operation is None
    assert calls == []


def test_action_with_helpers_return_copies():
    base = Action.none()
    with_op = base.with_operation("cancel")
    with_task = with_op.with_task(Task.done("focus"))
    assert base.operation is None
    assert with_op.task.is_none()
    assert with_task.operation == "cancel"
    assert with_task.task.run() == ["focus"]


def test_action_repr_shows_operation_only():
    a = Action.new("save", Task.done("m"))
    assert repr(a) == "Action(operation='save')"
