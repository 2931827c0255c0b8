import pytest


@pytest.fixture
def mock_aops_html():
    return (
        '<html><head><link rel="stylesheet" href="/a.css"></head><body>'
        '<div class="mw-parser-output">\n'
        '<h2><span class="mw-headline" id="Problem">Problem</span></h2>'
        "<p>What is 1+1?</p>"
        '<h2><span class="mw-headline" id="Solution">Solution</span></h2>'
        "<p>It is 2.</p>"
        '<h2><span class="mw-headline" id="See_Also">See Also</span></h2>'
        "<p>Other problems</p>"
        "</div></body></html>"
    )


@pytest.fixture
def mock_aops_toc_html():
    return (
        '<div class="mw-parser-output">'
        '<h2><span class="mw-headline" id="Problem">Problem</span></h2>\n'
        '<div id="toc" class="toc"><ul><li><a href="#Solution">'
        '<span class="toctext">Solution</span></a></li></ul></div>'
        "<p>Q</p>"
        '<h2><span class="mw-headline" id="Solution">Solution</span></h2>'
        "<p>A</p>"
        "</div>"
    )


@pytest.fixture
def mock_aops_unnamed_html():
    return (
        '<div class="mw-parser-output">'
        '<h2><span class="mw-headline" id="Problem_statement">Problem statement</span></h2>'
        "<p>Q</p>"
        '<h2><span class="mw-headline" id="Answer">Answer</span></h2>'
        "<p>A</p>"
        '<h2><span class="mw-headline" id="Notes">Notes</span></h2>'
        "<p>N</p>"
        "</div>"
    )
