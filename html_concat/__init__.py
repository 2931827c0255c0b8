from .aops import AopsScraper
from .base import BaseScraper
from .errors import (
    ContainerNotFound,
    ExtractionError,
    HarvestError,
    HarvestFailure,
    NoParent,
    SolutionAnchorNotFound,
    TransportError,
)
from .models import AggregateResult, Challenge, HarvestConfig, HarvestRequest

__all__ = [
    "AggregateResult",
    "AopsScraper",
    "BaseScraper",
    "Challenge",
    "ContainerNotFound",
    "ExtractionError",
    "HarvestConfig",
    "HarvestError",
    "HarvestFailure",
    "HarvestRequest",
    "NoParent",
    "SolutionAnchorNotFound",
    "TransportError",
]
