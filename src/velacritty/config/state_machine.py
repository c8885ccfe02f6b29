"""State machine tracking a single configuration load."""

from enum import Enum, auto
from typing import ClassVar


class ConfigLoadState(Enum):
    """Configuration load states.

    State transitions:
        PENDING -> PARSING: Start reading the root file and its imports
        PARSING -> VALIDATING: Merged tree built, converting to UiConfig
        VALIDATING -> READY: Typed configuration produced
        PENDING/PARSING/VALIDATING -> FAILED: Root file could not be loaded
    """

    PENDING = auto()
    PARSING = auto()
    VALIDATING = auto()
    READY = auto()
    FAILED = auto()


class ConfigLoadStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ConfigLoadState, to_state: ConfigLoadState) -> None:
        """Initialize the error.

        Args:
            from_state: The current state.
            to_state: The attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


class ConfigLoadStateMachine:
    """Enforces the order of stages within one load or reload."""

    VALID_TRANSITIONS: ClassVar[dict[ConfigLoadState, set[ConfigLoadState]]] = {
        ConfigLoadState.PENDING: {ConfigLoadState.PARSING, ConfigLoadState.FAILED},
        ConfigLoadState.PARSING: {ConfigLoadState.VALIDATING, ConfigLoadState.FAILED},
        ConfigLoadState.VALIDATING: {ConfigLoadState.READY, ConfigLoadState.FAILED},
        ConfigLoadState.READY: set(),
        ConfigLoadState.FAILED: set(),
    }

    def __init__(self) -> None:
        self._state = ConfigLoadState.PENDING

    @property
    def state(self) -> ConfigLoadState:
        """Get the current state."""
        return self._state

    def can_transition(self, to_state: ConfigLoadState) -> bool:
        """Check if a transition to the given state is valid."""
        return to_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition(self, to_state: ConfigLoadState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            ConfigLoadStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise ConfigLoadStateError(self._state, to_state)
        self._state = to_state

    def is_terminal(self) -> bool:
        """Check if no further transitions are allowed."""
        return self._state in (ConfigLoadState.READY, ConfigLoadState.FAILED)
