from html import escape

from .models import AggregateResult

DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
{styles}
</head>
<body>
<h1>{title}</h1>
{body}
</body>
</html>
"""


def _title(result: AggregateResult) -> str:
    kind = "Solutions" if result.is_solution else "Problems"
    return f"{result.challenge.display_name} {kind}"


def render_document(result: AggregateResult) -> str:
    styles = "\n".join(
        f'<link rel="stylesheet" href="{escape(href)}">' for href in result.styles
    )
    sections: list[str] = []
    for content in result.contents:
        sections.append(f'<h2 class="year">{content.year}</h2>')
        for p in content.problems:
            heading = f"{p.year} {result.challenge.display_name} Problem {p.number}"
            body = p.solution if result.is_solution else p.problem
            sections.append(
                f'<section class="problem" id="p{p.year}-{p.number}">\n'
                f"<h3>{escape(heading)}</h3>\n{body}\n</section>"
            )
    return DOCUMENT.format(
        title=escape(_title(result)), styles=styles, body="\n".join(sections)
    )
