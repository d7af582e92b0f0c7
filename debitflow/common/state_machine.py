"""Request lifecycle transitions enforced by the standalone credit orchestrator."""

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    "START": {"SCHEMA_RESOLVED"},
    "SCHEMA_RESOLVED": {"VALIDATED", "VALIDATION_FAILED"},
    "VALIDATED": {"SERIALIZED"},
    "VALIDATION_FAILED": set(),
    "SERIALIZED": {"DISPATCHED", "TRANSPORT_FAILED"},
    "DISPATCHED": set(),
    "TRANSPORT_FAILED": set(),
}

TERMINAL_STATES = frozenset(state for state, targets in ALLOWED_TRANSITIONS.items() if not targets)


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")
