import asyncio
import io
import sys
from pathlib import Path

import pytest

FIX = Path(__file__).resolve().parent / "fixtures"

PAGE = """<!DOCTYPE html>
<html>
<head>
{links}
</head>
<body>
<div id="content"><div class="mw-parser-output">
<h2><span class="mw-headline" id="Problem">Problem</span></h2><p>Problem {year}-{number} statement.</p><h2><span class="mw-headline" id="Solution">Solution</span></h2><p>Problem {year}-{number} solution.</p>
</div></div>
</body>
</html>
"""


@pytest.fixture
def fixture_text():
    def _load(name: str) -> str:
        p = FIX / name
        return p.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def make_page():
    def _make(year: int, number: int, styles: list[str] | None = None) -> str:
        links = "\n".join(
            f'<link rel="stylesheet" href="{href}"/>' for href in styles or []
        )
        return PAGE.format(links=links, year=year, number=number)

    return _make


def split_url(url: str) -> tuple[int, int]:
    # .../index.php/2003_AMC_8_Problems/Problem_23
    *_, page, problem = url.split("/")
    return int(page.split("_", 1)[0]), int(problem.rsplit("_", 1)[-1])


@pytest.fixture
def offline_fetch(mocker, make_page):
    """Route ``fetch_text`` to generated pages.

    ``pages`` maps ``(year, number)`` to markup or to an exception to raise;
    ``delays`` maps ``(year, number)`` to seconds to sleep before answering.
    """

    def _install(pages=None, delays=None, styles=None):
        pages = pages or {}
        delays = delays or {}
        requested: list[str] = []

        async def __offline_fetch_text(client, url: str) -> str:
            requested.append(url)
            key = split_url(url)
            await asyncio.sleep(delays.get(key, 0))
            page = pages.get(key)
            if isinstance(page, Exception):
                raise page
            if page is None:
                page = make_page(*key, (styles or {}).get(key))
            return page

        mocker.patch("html_concat.aops.fetch_text", side_effect=__offline_fetch_text)
        return requested

    return _install


@pytest.fixture
def run_cli():
    from html_concat.aops import main_async

    def _run(*args: str) -> tuple[int, str]:
        buf = io.StringIO()
        old_argv, old_stdout = sys.argv, sys.stdout
        sys.argv = ["aops.py", *args]
        sys.stdout = buf
        try:
            rc = asyncio.run(main_async())
        finally:
            sys.argv, sys.stdout = old_argv, old_stdout
        return rc, buf.getvalue()

    return _run

