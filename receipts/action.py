# receipts/action.py
"""
A common way for child views to hand work back to whoever owns them.

An update function returns an ``Action``. It may carry:

- an *operation*: an instruction the parent applies to its own state
  (navigate back, save the draft, start editing, ...). Operations never
  reach the Qt runtime; the parent interprets them.
- a *task*: deferred work the runtime executes after the next render, such
  as moving keyboard focus. A task may yield follow-up messages which are
  dispatched back through ``update``.

Both are optional. For example, leaving a screen and focusing its first
input is written as::

    Action.from_operation(Operation.BACK).with_task(focus_next())

Parents usually translate a child's action into their own vocabulary with
``map`` (messages) and ``map_operation`` (operations) before acting on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Iterable, Optional, TypeVar

M = TypeVar("M")
N = TypeVar("N")
O = TypeVar("O")
P = TypeVar("P")

Step = Callable[[], Optional[M]]


class Task(Generic[M]):
    """Ordered list of deferred steps; each step may produce one message."""

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[Step] = ()):
        self._steps: tuple[Step, ...] = tuple(steps)

    # ---- constructors ----------------------------------------------------

    @classmethod
    def none(cls) -> "Task[M]":
        return cls()

    @classmethod
    def done(cls, message: M) -> "Task[M]":
        return cls((lambda: message,))

    @classmethod
    def perform(
        cls,
        fn: Callable[[], object],
        on_result: Callable[[object], Optional[M]] | None = None,
    ) -> "Task[M]":
        """Run ``fn``; its result (through ``on_result`` if given) is the message."""
        if on_result is None:
            return cls((fn,))

        def step():
            return on_result(fn())

        return cls((step,))

    @classmethod
    def effect(cls, fn: Callable[[], object]) -> "Task[M]":
        """Run ``fn`` for its side effect only."""

        def step():
            fn()
            return None

        return cls((step,))

    @classmethod
    def batch(cls, *tasks: "Task[M]") -> "Task[M]":
        steps: list[Step] = []
        for t in tasks:
            steps.extend(t._steps)
        return cls(steps)

    # ---- combinators -----------------------------------------------------

    def chain(self, other: "Task[M]") -> "Task[M]":
        return Task(self._steps + other._steps)

    def map(self, f: Callable[[M], N]) -> "Task[N]":
        def wrap(step: Step) -> Step:
            def mapped():
                msg = step()
                return None if msg is None else f(msg)

            return mapped

        return Task(wrap(s) for s in self._steps)

    # ---- execution -------------------------------------------------------

    def run(self) -> list[M]:
        out: list[M] = []
        for step in self._steps:
            msg = step()
            if msg is not None:
                out.append(msg)
        return out

    def is_none(self) -> bool:
        return not self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Task(steps={len(self._steps)})"


@dataclass(frozen=True, repr=False)
class Action(Generic[O, M]):
    operation: Optional[O] = None
    task: Task[M] = field(default_factory=Task.none)

    @classmethod
    def none(cls) -> "Action[O, M]":
        """No operation and no task."""
        return cls()

    @classmethod
    def new(cls, operation: O, task: Task[M]) -> "Action[O, M]":
        return cls(operation=operation, task=task)

    @classmethod
    def from_operation(cls, operation: O) -> "Action[O, M]":
        """An operation for an ancestor to handle, with no task."""
        return cls(operation=operation)

    @classmethod
    def from_task(cls, task: Task[M]) -> "Action[O, M]":
        return cls(task=task)

    def map(self, f: Callable[[M], N]) -> "Action[O, N]":
        """Map the messages produced by the task to another type."""
        return Action(operation=self.operation, task=self.task.map(f))

    def map_operation(self, f: Callable[[O], P]) -> "Action[P, M]":
        op = None if self.operation is None else f(self.operation)
        return Action(operation=op, task=self.task)

    def with_operation(self, operation: O) -> "Action[O, M]":
        return replace(self, operation=operation)

    def with_task(self, task: Task[M]) -> "Action[O, M]":
        return replace(self, task=task)

    def __repr__(self) -> str:
        return f"Action(operation={self.operation!r})"
