from abc import ABC, abstractmethod

from .errors import HarvestError
from .models import AggregateResult, HarvestConfig, HarvestErrorResult, HarvestRequest


class BaseScraper(ABC):
    def __init__(self, config: HarvestConfig | None = None):
        self.config = config or HarvestConfig()

    @property
    @abstractmethod
    def platform_name(self) -> str: ...

    @abstractmethod
    def build_url(self, request: HarvestRequest, year: int, number: int) -> str: ...

    @abstractmethod
    async def harvest(self, request: HarvestRequest) -> AggregateResult: ...

    def _create_harvest_error(self, error: Exception) -> HarvestErrorResult:
        if isinstance(error, HarvestError):
            return HarvestErrorResult(
                error=f"{self.platform_name}: {error}",
                year=error.year,
                number=error.number,
                kind=error.kind,
            )
        return HarvestErrorResult(
            error=f"{self.platform_name}: {error}",
            kind=type(error).__name__,
        )
