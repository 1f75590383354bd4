"""Error definitions for procutil."""

# ============================================================================
#                           General errors
# ============================================================================


class ProcutilError(Exception):
    """Base class for procutil errors."""


class InvalidSettingError(ProcutilError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: expected {expected}.")
        self.name = name
        self.value = value
        self.expected = expected


class TerminalReadError(ProcutilError):
    """Raised when reading a line from the terminal fails."""

    def __init__(self, prompt: str, reason: str) -> None:
        super().__init__(f"Failed to read input for prompt {prompt!r}: {reason}")
        self.prompt = prompt
        self.reason = reason


# ============================================================================
#                           Profiling errors
# ============================================================================


class ProfilingError(ProcutilError):
    """Base class for profiling configuration errors."""


class UnknownKnobError(ProfilingError):
    """Raised when a profiling knob name is not recognised."""

    def __init__(self, knob: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown profiling knob {knob!r}; expected one of {', '.join(known)}."
        )
        self.knob = knob
        self.known = known


class InvalidRateError(ProfilingError):
    """Raised when a profiling rate is negative."""

    def __init__(self, knob: str, rate: int) -> None:
        super().__init__(f"Profiling rate for {knob!r} must be >= 0, got {rate}.")
        self.knob = knob
        self.rate = rate
