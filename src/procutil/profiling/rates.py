"""Named profiling sample rates.

Each knob is independently settable and queryable. A rate of zero means the
knob is off; the meaning of a nonzero rate depends on the knob:

- ``heap``: allocation tracing through `tracemalloc` (any nonzero value turns
  tracing on; the value is kept for reporting).
- ``block``: nanoseconds of blocking per sampled event on a `ProfiledLock`.
- ``cpu``: stack samples per second of process CPU time.
- ``mutex``: one in ``mutex`` contention events on a `ProfiledLock` is kept.
"""

from dataclasses import asdict, dataclass, fields, replace

from procutil.errors import InvalidRateError, UnknownKnobError


@dataclass(frozen=True)
class ProfilingRates:
    """Sample rates for the four profiling knobs."""

    heap: int = 0
    block: int = 0
    cpu: int = 0
    mutex: int = 0

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if value < 0:
                raise InvalidRateError(name, value)

    @classmethod
    def knobs(cls) -> tuple[str, ...]:
        """Return the knob names in declaration order."""
        return tuple(f.name for f in fields(cls))

    def get(self, knob: str) -> int:
        """Return the rate for ``knob``.

        Raises:
            UnknownKnobError: If ``knob`` is not a known knob name.
        """
        check_knob(knob)
        return getattr(self, knob)

    def with_rate(self, knob: str, rate: int) -> "ProfilingRates":
        """Return a copy with ``knob`` set to ``rate``."""
        check_knob(knob)
        return replace(self, **{knob: rate})

    def active(self) -> tuple[str, ...]:
        """Return the names of knobs with a nonzero rate."""
        return tuple(name for name in self.knobs() if getattr(self, name))

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def check_knob(knob: str) -> None:
    """Raise `UnknownKnobError` unless ``knob`` names a profiling knob."""
    if knob not in ProfilingRates.knobs():
        raise UnknownKnobError(knob, ProfilingRates.knobs())


ENABLED_RATES = ProfilingRates(heap=10, block=1000, cpu=1000, mutex=10)
DISABLED_RATES = ProfilingRates()
