"""Load lifecycle state machine."""

from __future__ import annotations

from enum import Enum, auto
import logging


class LoaderState(Enum):
    UNINITIALIZED = auto()
    FLAGS_PARSED = auto()
    LOADED = auto()
    FAILED = auto()


class LoaderEvent(Enum):
    FLAGS_PARSED = auto()
    LOAD_OK = auto()
    LOAD_FAILED = auto()


_TRANSITIONS = {
    LoaderState.UNINITIALIZED: {
        LoaderEvent.FLAGS_PARSED: LoaderState.FLAGS_PARSED,
    },
    LoaderState.FLAGS_PARSED: {
        LoaderEvent.LOAD_OK: LoaderState.LOADED,
        LoaderEvent.LOAD_FAILED: LoaderState.FAILED,
    },
    # A loaded process may load further files (e.g. load_direct for a
    # second destination); a failed one stays failed.
    LoaderState.LOADED: {
        LoaderEvent.LOAD_OK: LoaderState.LOADED,
        LoaderEvent.LOAD_FAILED: LoaderState.FAILED,
    },
    LoaderState.FAILED: {},
}


class LoaderStateMachine:
    def __init__(self, state: LoaderState = LoaderState.UNINITIALIZED):
        self.state = state

    def transition(self, event: LoaderEvent) -> LoaderState:
        next_state = _TRANSITIONS.get(self.state, {}).get(event, self.state)
        if next_state == self.state and event not in _TRANSITIONS.get(self.state, {}):
            logging.getLogger(__name__).warning(
                "Invalid state transition: %s --%s--> %s", self.state, event, next_state
            )
        self.state = next_state
        return self.state
