"""dragonsay: a dragon that holds up your side dishes in the terminal."""

from dragonsay.renderer import SlotPolicy, derive_slots, render_blank_frame, render_frame
from dragonsay.sequencer import AnimationPlan, Sequencer, say
from dragonsay.version import get_dragonsay_version

__version__ = get_dragonsay_version()

__all__ = [
    "AnimationPlan",
    "Sequencer",
    "SlotPolicy",
    "derive_slots",
    "render_blank_frame",
    "render_frame",
    "say",
]
