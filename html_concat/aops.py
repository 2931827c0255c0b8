#!/usr/bin/env python3

import asyncio
import logging
import os
import sys

import httpx

from .base import BaseScraper
from .errors import HarvestError, HarvestFailure, TransportError
from .extract import parse_page
from .models import (
    AggregateResult,
    Challenge,
    ExtractedProblem,
    HarvestErrorResult,
    HarvestRequest,
    YearGroup,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://artofproblemsolving.com"
PROBLEM_PATH = "/wiki/index.php/{year}_{challenge}_Problems/Problem_{number}"
USAGE = "Usage: aops.py <problems|solutions|json> <challenge> <problems> <years> [<years> ...]"

_background: set[asyncio.Task] = set()


def get_url(year: int, number: int, challenge: Challenge) -> str:
    return BASE_URL + PROBLEM_PATH.format(
        year=year, challenge=challenge.value, number=number
    )


async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
    try:
        r = await client.get(url)
        r.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(url, str(e) or type(e).__name__) from e
    return r.text


def _retrieve(task: asyncio.Task) -> BaseException | None:
    if task.cancelled():
        return None
    return task.exception()


def _discard(task: asyncio.Task) -> None:
    exc = _retrieve(task)
    if exc is not None:
        logger.warning("discarded in-flight unit failed: %s", exc)


async def _close_when_done(client: httpx.AsyncClient, pending: set[asyncio.Task]) -> None:
    try:
        await asyncio.wait(pending)
    finally:
        await client.aclose()


class AopsScraper(BaseScraper):
    @property
    def platform_name(self) -> str:
        return "aops"

    def build_url(self, request: HarvestRequest, year: int, number: int) -> str:
        return get_url(year, number, request.challenge)

    def _spawn(self, spawned: list[asyncio.Task], coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        spawned.append(task)
        return task

    async def _scrape_problem(
        self, client: httpx.AsyncClient, request: HarvestRequest, year: int, number: int
    ) -> tuple[list[str], ExtractedProblem]:
        url = self.build_url(request, year, number)
        logger.debug("fetching %s", url)
        html = await fetch_text(client, url)
        return await asyncio.to_thread(parse_page, year, number, html)

    async def _scrape_year(
        self,
        client: httpx.AsyncClient,
        request: HarvestRequest,
        year: int,
        spawned: list[asyncio.Task],
    ) -> tuple[list[str], YearGroup]:
        content = YearGroup(year=year)
        styles: list[str] = []
        tasks = [
            self._spawn(spawned, self._scrape_problem(client, request, year, number))
            for number in request.problem_numbers
        ]

        for number, task in zip(request.problem_numbers, tasks):
            try:
                page_styles, problem = await task
            except HarvestFailure as e:
                raise HarvestError(e, year, number) from e
            content.add(problem)
            if not styles:
                styles = page_styles

        logger.info(
            "%s: %d %s done (%d problems)",
            self.platform_name,
            year,
            request.challenge,
            len(content.problems),
        )
        return styles, content

    async def _abandon(
        self, client: httpx.AsyncClient, spawned: list[asyncio.Task], cancel: bool
    ) -> None:
        pending = {t for t in spawned if not t.done()}
        for task in spawned:
            if task.done():
                _retrieve(task)
            else:
                task.add_done_callback(_discard)
        if not pending:
            await client.aclose()
            return

        if cancel:
            for task in pending:
                task.cancel()
            await _close_when_done(client, pending)
            return

        # the client must outlive the units that are still using it
        logger.debug("%d units still in flight", len(pending))
        closer = asyncio.create_task(_close_when_done(client, pending))
        _background.add(closer)
        closer.add_done_callback(_background.discard)

    async def harvest(self, request: HarvestRequest) -> AggregateResult:
        years = list(request.years)
        if self.config.dedupe_years:
            years = list(dict.fromkeys(years))

        result = AggregateResult(challenge=request.challenge)
        client = httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            limits=httpx.Limits(max_connections=self.config.max_connections),
        )
        spawned: list[asyncio.Task] = []
        try:
            year_tasks = [
                self._spawn(spawned, self._scrape_year(client, request, year, spawned))
                for year in years
            ]
            for task in year_tasks:
                styles, content = await task
                result.seed_styles(styles)
                result.contents.append(content)
        except HarvestError as e:
            logger.warning("%s: harvest aborted: %s", self.platform_name, e)
            await self._abandon(client, spawned, self.config.cancel_on_failure)
            raise
        except asyncio.CancelledError:
            logger.warning("%s: harvest cancelled", self.platform_name)
            await self._abandon(client, spawned, True)
            raise
        except Exception as e:
            logger.warning(
                "%s: harvest aborted by unexpected error: %r", self.platform_name, e
            )
            await self._abandon(client, spawned, self.config.cancel_on_failure)
            raise

        await client.aclose()
        return result


def parse_range(value: str) -> tuple[int, int]:
    start, sep, end = value.partition("-")
    try:
        first = int(start)
        last = int(end) if sep else first
    except ValueError:
        raise ValueError(f"Invalid range: {value}") from None
    return first, last


async def main_async() -> int:
    level = os.environ.get("HTML_CONCAT_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        result = HarvestErrorResult(error=f"Unknown HTML_CONCAT_LOG_LEVEL: {level}")
        print(result.model_dump_json())
        return 1
    logging.basicConfig(level=level, stream=sys.stderr)

    scraper = AopsScraper()

    if len(sys.argv) < 5:
        print(HarvestErrorResult(error=USAGE).model_dump_json())
        return 1

    mode: str = sys.argv[1]
    if mode not in ("problems", "solutions", "json"):
        result = HarvestErrorResult(
            error=f"Unknown mode: {mode}. Use 'problems', 'solutions', or 'json'"
        )
        print(result.model_dump_json())
        return 1

    try:
        challenge = Challenge.parse(sys.argv[2])
        problems = parse_range(sys.argv[3])
        year_ranges = [parse_range(v) for v in sys.argv[4:]]
        request = HarvestRequest.build(year_ranges, problems, challenge)
    except ValueError as e:
        print(HarvestErrorResult(error=f"{USAGE} ({e})").model_dump_json())
        return 1

    try:
        aggregate = await scraper.harvest(request)
    except HarvestError as e:
        print(scraper._create_harvest_error(e).model_dump_json())
        return 1

    if mode == "problems":
        print(aggregate.generate_problem())
    elif mode == "solutions":
        print(aggregate.generate_solution())
    else:
        print(aggregate.model_dump_json())
    return 0


def main() -> None:
    sys.exit(asyncio.run(main_async()))


if __name__ == "__main__":
    main()
