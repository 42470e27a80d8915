"""Loading lifecycle for a harness configuration file."""

from enum import Enum
from typing import ClassVar


class ConfigState(str, Enum):
    """Configuration loading states.

    State transitions:
        UNLOADED -> LOADING: Start reading the configuration file
        LOADING -> VALIDATED: Raw record parsed and resolved
        VALIDATED -> READY: Resolved configuration handed to the harness
        Any non-terminal -> FAILED: Error occurred at any stage
    """

    UNLOADED = "UNLOADED"
    LOADING = "LOADING"
    VALIDATED = "VALIDATED"
    READY = "READY"
    FAILED = "FAILED"


class ConfigStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ConfigState, to_state: ConfigState) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid config state transition: {from_state.value} -> {to_state.value}"
        )


class ConfigStateMachine:
    """Tracks the loading lifecycle of one configuration.

    A configuration is loaded once per run, so READY and FAILED are both
    terminal.
    """

    TRANSITIONS: ClassVar[dict[ConfigState, frozenset[ConfigState]]] = {
        ConfigState.UNLOADED: frozenset({ConfigState.LOADING, ConfigState.FAILED}),
        ConfigState.LOADING: frozenset({ConfigState.VALIDATED, ConfigState.FAILED}),
        ConfigState.VALIDATED: frozenset({ConfigState.READY, ConfigState.FAILED}),
        ConfigState.READY: frozenset(),
        ConfigState.FAILED: frozenset(),
    }

    def __init__(self) -> None:
        self._state = ConfigState.UNLOADED
        self._history: list[ConfigState] = [ConfigState.UNLOADED]

    @property
    def state(self) -> ConfigState:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> tuple[ConfigState, ...]:
        """Get every state visited, in order."""
        return tuple(self._history)

    def can_transition(self, to_state: ConfigState) -> bool:
        """Check if a transition to the given state is valid."""
        return to_state in self.TRANSITIONS[self._state]

    def transition(self, to_state: ConfigState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            ConfigStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise ConfigStateError(self._state, to_state)
        self._state = to_state
        self._history.append(to_state)

    def fail(self) -> None:
        """Move to FAILED unless already in a terminal state."""
        if not self.is_terminal():
            self.transition(ConfigState.FAILED)

    def is_terminal(self) -> bool:
        """Check if no further transitions are allowed."""
        return not self.TRANSITIONS[self._state]

    def is_ready(self) -> bool:
        """Check if configuration is ready for use."""
        return self._state == ConfigState.READY
