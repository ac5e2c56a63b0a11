import pytest
import cssselect
from lxml import html

from css_selector_builder import css_selector_builder as b

PAGE = """
<html><body>
    <ul class="menu">
        <li class="item">Home</li>
        <li>About</li>
    </ul>
    <div id="main" class="card"></div>
    <table id="data"><tr><td>1</td></tr></table>
    <p>After table</p>
    <a href="/logo.png">Logo</a>
    <a href="/index.html">Index</a>
</body></html>
"""

def test_rendered_selectors_parse_with_cssselect():
    selectors = [
        b.element("a").attr('href$=".png"').pseudo_class("focus"),
        b.id("main").class_("container").class_("editable"),
        b.element("p").pseudo_element("before"),
        b.combine(b.element("div").id("main"), "+", b.element("table").id("data")),
        b.combine(
            b.element("tr").pseudo_class("nth-of-type(even)"),
            " ",
            b.element("td").pseudo_class("nth-of-type(even)")
        ),
    ]

    for selector in selectors:
        parsed = cssselect.parse(selector.stringify())
        assert len(parsed) == 1

@pytest.mark.parametrize("selector, expected_count", [
    (b.combine(b.element("ul").class_("menu"), ">", b.element("li").class_("item")), 1),
    (b.combine(b.element("div").id("main"), "+", b.element("table").id("data")), 1),
    (b.combine(b.element("div").class_("card"), "~", b.element("p")), 1),
    (b.combine(b.element("table"), " ", b.element("td")), 1),
    (b.element("a").attr('href$=".png"'), 1),
    (b.element("li"), 2),
])
def test_rendered_selectors_match_document(selector, expected_count):
    tree = html.fromstring(PAGE)
    assert len(tree.cssselect(selector.stringify())) == expected_count
