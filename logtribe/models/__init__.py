"""logtribe data models, Pydantic v2, frozen."""

from logtribe.models.capabilities import SETTABLE_ATTRIBUTES, SinkCapabilities
from logtribe.models.profile import SinkSpec, TribeProfile

__all__ = [
    "SETTABLE_ATTRIBUTES",
    "SinkCapabilities",
    "SinkSpec",
    "TribeProfile",
]
