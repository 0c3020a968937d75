from breath.renderers.atomic import AtomicBaseRenderer  # noqa: F401
from breath.renderers.stateful import StatefulBaseRenderer  # noqa: F401
