class HarvestFailure(Exception):
    """Base class for everything a harvest run can fail with."""


class TransportError(HarvestFailure):
    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url


class ExtractionError(HarvestFailure):
    """The page markup did not have the expected shape."""

    def __init__(self, message: str, year: int | None = None, number: int | None = None):
        super().__init__(message)
        self.year = year
        self.number = number


class ContainerNotFound(ExtractionError):
    pass


class SolutionAnchorNotFound(ExtractionError):
    pass


class NoParent(ExtractionError):
    pass


class HarvestError(HarvestFailure):
    def __init__(self, cause: Exception, year: int | None = None, number: int | None = None):
        self.cause = cause
        self.year = year
        self.number = number
        self.kind = type(cause).__name__
        where = ""
        if year is not None and number is not None:
            where = f" at {year} problem {number}"
        elif year is not None:
            where = f" at {year}"
        super().__init__(f"{self.kind}{where}: {cause}")
