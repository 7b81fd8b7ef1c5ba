"""Finite state machine with validated transitions.

The measurement session describes its legal moves as a graph of Actions and
asks this machine to validate every change of state. An Action can carry an
effect that runs when its transition is taken.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Effect run when a transition is taken."""

StateGraph = dict[Enum, Iterable["Action"]]
"""Mapping from each state to the actions allowed out of it."""


@dataclass(frozen=True)
class Action:
    """A transition to ``state`` with an optional effect.

    Attributes:
        state: The target state this action transitions to.
        effect: Optional function to execute when this action is performed.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        """Run the effect, if any, and return its result."""
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """A finite state machine that only moves along its graph.

    Attributes:
        _state: The current state.
        _allowed: Mapping from states to the actions allowed out of them.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        """Initialize the machine.

        Args:
            initial_state: The starting state.
            nodes_graph: Mapping of each state to its allowed actions.

        Raises:
            ValueError: If ``initial_state`` is not a node of the graph.
        """
        if initial_state not in nodes_graph:
            msg = f"Initial state {initial_state.name} is not in the transition graph"
            raise ValueError(msg)
        self._state = initial_state
        self._allowed = nodes_graph

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the matching action's effect.

        Args:
            next_state: The target state.
            *args: Forwarded to the action effect.
            **kwargs: Forwarded to the action effect.

        Returns:
            The result of the action effect, or None.

        Raises:
            ValueError: If the graph has no edge from the current state to
                ``next_state``.
        """
        next_action = self._validate_transition(self.current, next_state)
        self._state = next_action.state
        return next_action(*args, **kwargs)

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        """Find the action leading from ``frm`` to ``to``.

        Raises:
            ValueError: If no such action exists.
        """
        for action in self._allowed.get(frm, ()):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} → {to.name}"
        raise ValueError(msg)
