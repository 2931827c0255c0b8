"""Split an AoPS wiki problem page into its problem and solution fragments.

Pages on the wiki are not consistent about how the solution heading is
named, so the solution anchor is located by trying a ranked list of
strategies: explicit heading ids first, then the second section headline
on the page as a positional fallback.
"""

import copy
import logging

from bs4 import BeautifulSoup, Tag

from .errors import ContainerNotFound, NoParent, SolutionAnchorNotFound
from .models import ExtractedProblem

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = "div.mw-parser-output"
TOC_SELECTOR = "div#toc"
HEADLINE_SELECTOR = "span.mw-headline"
SEE_ALSO_ID = "See_Also"


class IdAnchor:
    def __init__(self, anchor_id: str):
        self.anchor_id = anchor_id

    def locate(self, root: Tag) -> Tag | None:
        return root.find(id=self.anchor_id)

    def __repr__(self) -> str:
        return f"IdAnchor({self.anchor_id!r})"


class NthMarker:
    def __init__(self, selector: str, index: int):
        self.selector = selector
        self.index = index

    def locate(self, root: Tag) -> Tag | None:
        found = root.select(self.selector)
        return found[self.index] if len(found) > self.index else None

    def __repr__(self) -> str:
        return f"NthMarker({self.selector!r}, {self.index})"


ANCHOR_STRATEGIES = (
    IdAnchor("Solution"),
    IdAnchor("Solution_1"),
    NthMarker(HEADLINE_SELECTOR, 1),
)


def locate_anchor(root: Tag, strategies=ANCHOR_STRATEGIES) -> Tag | None:
    for strategy in strategies:
        node = strategy.locate(root)
        if node is not None:
            logger.debug("solution anchor matched by %r", strategy)
            return node
    return None


def _select_stylesheets(soup: BeautifulSoup) -> list[str]:
    styles: list[str] = []
    for link in soup.select("link[rel=stylesheet]"):
        href = link.get("href")
        if isinstance(href, str) and href.endswith("css"):
            styles.append(href)
    return styles


def collect_stylesheets(html: str) -> list[str]:
    return _select_stylesheets(BeautifulSoup(html, "html.parser"))


def partition(
    fragment: BeautifulSoup,
    has_toc: bool,
    is_solution: bool,
    year: int | None = None,
    number: int | None = None,
) -> str:
    """Return the problem view or the solution view of ``fragment``.

    ``fragment`` itself is left untouched; the edits happen on a copy so the
    two views can be derived from the same tree.

    Direct children of the solution heading's parent are walked in order.
    The problem view keeps everything before the solution heading, minus the
    blank node at a fixed position (index 1 after a TOC, else 0). The
    solution view keeps everything from the solution heading on. Both views
    drop the "See Also" heading and everything after it.
    """
    tree = copy.copy(fragment)

    anchor = locate_anchor(tree)
    if anchor is None:
        raise SolutionAnchorNotFound("No solution found", year, number)

    node = anchor.parent
    if node is None:
        raise NoParent("No solution parent found", year, number)

    see_also = tree.find(id=SEE_ALSO_ID)
    see_also_node = see_also.parent if see_also is not None else None

    parent = node.parent
    if parent is None:
        raise NoParent("No parent found", year, number)

    placeholder_index = 1 if has_toc else 0
    deleting = is_solution
    to_delete = []
    for idx, child in enumerate(parent.contents):
        placeholder = not is_solution and idx == placeholder_index
        if child is node:
            deleting = not is_solution
        if see_also_node is not None and child is see_also_node:
            deleting = True
        if placeholder or deleting:
            to_delete.append(child)

    for child in to_delete:
        child.extract()
    return tree.decode_contents()


def _extract(year: int, number: int, soup: BeautifulSoup) -> ExtractedProblem:
    container = soup.select_one(CONTAINER_SELECTOR)
    if container is None:
        raise ContainerNotFound("No problem found", year, number)

    fragment = BeautifulSoup(str(container), "html.parser")
    toc = fragment.select_one(TOC_SELECTOR)
    has_toc = toc is not None
    if toc is not None:
        toc.decompose()
    else:
        logger.debug("%d problem %d: no table of contents", year, number)

    problem = partition(fragment, has_toc, False, year, number)
    solution = partition(fragment, has_toc, True, year, number)

    return ExtractedProblem(
        year=year,
        number=number,
        problem=problem,
        solution=solution,
    )


def parse_html(year: int, number: int, html: str) -> ExtractedProblem:
    return _extract(year, number, BeautifulSoup(html, "html.parser"))


def parse_page(year: int, number: int, html: str) -> tuple[list[str], ExtractedProblem]:
    """Stylesheets and extracted fragments from a single parse of ``html``."""
    soup = BeautifulSoup(html, "html.parser")
    return _select_stylesheets(soup), _extract(year, number, soup)
