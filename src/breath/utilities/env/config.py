from breath.utilities.env.display import DisplayConfiguration
from breath.utilities.env.noise import NoiseConfiguration


class Configuration(
    DisplayConfiguration,
    NoiseConfiguration,
):
    """Aggregate environment configuration helpers."""
