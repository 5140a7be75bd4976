"""Time range argument helpers."""

from ffedit.models.plan import EditPlan
from ffedit.tools.helpers import format_number

START: tuple[str, ...] = ("-ss",)  #: Seek to this offset before decoding; must precede the input.
DURATION: tuple[str, ...] = ("-t",)  #: Duration to write from the start position.


def seek(plan: EditPlan) -> tuple[str, ...]:
    """Return input seek args for a trimmed start."""
    if plan.start_sec:
        return (*START, format_number(plan.start_sec))
    return ()


def duration(plan: EditPlan) -> tuple[str, ...]:
    """Return output duration args from ``--trim-to`` or ``--trim-end``."""
    if plan.duration_sec:
        return (*DURATION, format_number(plan.duration_sec))
    return ()
