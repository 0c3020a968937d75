"""Environment configuration helpers."""

from breath.utilities.env.config import Configuration as Configuration
