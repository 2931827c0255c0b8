from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Challenge(str, Enum):
    AMC_8 = "AMC_8"
    AMC_10A = "AMC_10A"
    AMC_10B = "AMC_10B"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, value: str) -> "Challenge":
        aliases = {"amc8": cls.AMC_8, "amc10a": cls.AMC_10A, "amc10b": cls.AMC_10B}
        key = value.strip().lower().replace("_", "").replace(" ", "")
        if key not in aliases:
            raise ValueError(
                f"Unknown challenge: {value}. Available: {', '.join(c.value for c in cls)}"
            )
        return aliases[key]


class HarvestRequest(BaseModel):
    years: tuple[int, ...]
    problem_numbers: tuple[int, ...]
    challenge: Challenge = Challenge.AMC_8

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def check_values(self) -> "HarvestRequest":
        if not self.years:
            raise ValueError("at least one year is required")
        if not self.problem_numbers:
            raise ValueError("at least one problem number is required")
        if any(v <= 0 for v in self.years + self.problem_numbers):
            raise ValueError("years and problem numbers must be positive")
        return self

    @classmethod
    def build(
        cls,
        year_ranges: list[tuple[int, int]],
        problems: tuple[int, int],
        challenge: Challenge = Challenge.AMC_8,
    ) -> "HarvestRequest":
        years: list[int] = []
        for start, end in year_ranges:
            if start > end:
                raise ValueError(f"Invalid year range: {start}-{end}")
            years.extend(range(start, end + 1))
        first, last = problems
        if first > last:
            raise ValueError(f"Invalid problem range: {first}-{last}")
        return cls(
            years=tuple(years),
            problem_numbers=tuple(range(first, last + 1)),
            challenge=challenge,
        )


class ExtractedProblem(BaseModel):
    year: int
    number: int
    problem: str
    solution: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class YearGroup(BaseModel):
    year: int
    problems: list[ExtractedProblem] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def add(self, problem: ExtractedProblem) -> None:
        self.problems.append(problem)
        self.problems.sort(key=lambda p: p.number)


class AggregateResult(BaseModel):
    styles: list[str] = Field(default_factory=list)
    challenge: Challenge = Challenge.AMC_8
    is_solution: bool = False
    contents: list[YearGroup] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def seed_styles(self, styles: list[str]) -> None:
        if not self.styles:
            self.styles = list(styles)

    def generate_problem(self) -> str:
        from .render import render_document

        self.is_solution = False
        return render_document(self)

    def generate_solution(self) -> str:
        from .render import render_document

        self.is_solution = True
        return render_document(self)


class HarvestConfig(BaseModel):
    timeout_seconds: float | None = None
    max_connections: int | None = None
    dedupe_years: bool = False
    cancel_on_failure: bool = False

    model_config = ConfigDict(extra="forbid")


class HarvestErrorResult(BaseModel):
    success: bool = False
    error: str
    year: int | None = None
    number: int | None = None
    kind: str = ""

    model_config = ConfigDict(extra="forbid")
