"""Audio stream argument helpers."""

from ffedit.models.plan import EditPlan
from ffedit.tools.helpers import format_number

from .stream_args import disable_stream, filter_flag

FILTER: tuple[str, ...] = filter_flag("a")  #: Filter graph flag for audio processing steps.
DISABLE: tuple[str, ...] = disable_stream("a")  #: Drop all audio streams.

ATEMPO_MIN = 0.5  #: Smallest factor a single ``atempo`` filter accepts.
ATEMPO_MAX = 100.0  #: Largest factor a single ``atempo`` filter accepts.
SEMITONES_PER_OCTAVE = 12


def tempo_filters(speed: float) -> tuple[str, ...]:
    """Return ``atempo`` filters whose factors multiply to ``speed``.

    A speed inside the ``atempo`` range yields exactly one filter. Outside it,
    the speed is split into in-range factors.
    """
    factors: list[float] = []
    remaining = speed
    while remaining < ATEMPO_MIN:
        factors.append(ATEMPO_MIN)
        remaining /= ATEMPO_MIN
    while remaining > ATEMPO_MAX:
        factors.append(ATEMPO_MAX)
        remaining /= ATEMPO_MAX
    factors.append(remaining)
    return tuple(f"atempo={format_number(f)}" for f in factors)


def pitch_filter(semitones: float) -> str:
    """Return a ``rubberband`` filter shifting pitch by ``semitones`` (negative lowers)."""
    ratio = 2 ** (semitones / SEMITONES_PER_OCTAVE)
    return f"rubberband=pitch={format_number(ratio)}"


def filters(plan: EditPlan) -> tuple[str, ...]:
    """Return audio filter expressions in application order: tempo, then pitch."""
    opts = plan.opts
    flt: list[str] = []
    if opts.speed != 1.0:
        flt.extend(tempo_filters(opts.speed))
    flt.extend(pitch_filter(shift) for shift in opts.pitch_shifts)
    return tuple(flt)


def build(plan: EditPlan) -> tuple[str, ...]:
    """Return a single ``-af`` flag carrying the whole chain.

    FFmpeg only honors the last ``-af`` given, so filters are joined rather
    than passed as repeated flags.
    """
    if flt := filters(plan):
        return (*FILTER, ",".join(flt))
    return ()


def mute(plan: EditPlan) -> tuple[str, ...]:
    """Return args to drop audio when muting."""
    return DISABLE if plan.opts.mute else ()
