from breath.renderers.breathing_rings.provider import \
    FrameStateProvider  # noqa: F401
from breath.renderers.breathing_rings.renderer import \
    BreathingRingsRenderer  # noqa: F401
from breath.renderers.breathing_rings.state import (RING_SPECS,  # noqa: F401
                                                    FrameState, RingSpec)
