"""Build FFmpeg command arguments from an edit plan."""

from ffedit.models.plan import EditPlan

from . import audio, trim, video
from .command_args import INPUT_FLAG, LOGLEVEL_ERROR


def build_command(plan: EditPlan) -> tuple[str, ...]:
    """Return the FFmpeg arguments for ``plan``, ending with the output path.

    Flags follow the input in a fixed order: video filter, audio filter chain,
    duration, mute. A start trim is an input option, so its seek goes in front
    of ``-i``. The video stream is always copied.
    """
    args = INPUT_FLAG + (str(plan.opts.input),) + LOGLEVEL_ERROR
    args = args + video.build(plan) + audio.build(plan) + trim.duration(plan) + audio.mute(plan)
    args = trim.seek(plan) + args
    return args + video.copy() + (str(plan.output_path),)


__all__ = ["build_command"]
