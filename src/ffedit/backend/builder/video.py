"""Video stream argument helpers."""

from ffedit.models.plan import EditPlan
from ffedit.tools.helpers import format_number

from .stream_args import copy_stream, filter_flag

COPY: tuple[str, ...] = copy_stream("v")  #: Pass video stream through without re-encoding.
FILTER: tuple[str, ...] = filter_flag("v")  #: Filter graph flag for video processing steps.


def speed_filter(speed: float) -> str:
    """Return a ``setpts`` expression that plays video ``speed`` times as fast."""
    return f"setpts={format_number(1 / speed)}*PTS"


def filters(plan: EditPlan) -> tuple[str, ...]:
    """Return video filter expressions for ``plan``."""
    if plan.opts.speed != 1.0:
        return (speed_filter(plan.opts.speed),)
    return ()


def build(plan: EditPlan) -> tuple[str, ...]:
    """Return the ``-vf`` flag and filter graph, or nothing when no filter applies."""
    if flt := filters(plan):
        return (*FILTER, ",".join(flt))
    return ()


def copy() -> tuple[str, ...]:
    """Return args to stream copy the video."""
    return COPY
