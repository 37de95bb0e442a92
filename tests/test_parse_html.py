# -----------------------------
# File: tests/test_parse_html.py
# -----------------------------
from html_parsing import extract_wiki_links

BASE = 'https://en.wikipedia.org/wiki/Start'

HTML = '''
<html><body>
<div id="mw-head"><a href="/wiki/Main_Page">Main page</a></div>
<div id="content">
  <h1>Start</h1>
  <p>See <a href="/wiki/Alpha"> Alpha </a> and <a href="/wiki/Beta#History">Beta history</a>.</p>
  <p>Again <a href="/wiki/Alpha">alpha again</a>, <a href="/w/index.php?title=X">edit</a>,
     <a href="https://other.example/two">external</a>,
     <a href="/wiki/File:Pic.png">picture</a>, <a href="/wiki/Beta">Beta</a>.</p>
</div>
</body></html>
'''


def test_extracts_content_wiki_links_in_order():
    links = extract_wiki_links(HTML, BASE)
    assert [v.id for v in links] == [
        'https://en.wikipedia.org/wiki/Alpha',
        'https://en.wikipedia.org/wiki/Beta',
        'https://en.wikipedia.org/wiki/File:Pic.png',
    ]


def test_first_anchor_text_is_the_label():
    links = extract_wiki_links(HTML, BASE)
    assert links[0].label == 'Alpha'
    assert links[1].label == 'Beta history'


def test_articles_only_drops_namespaced_pages():
    links = extract_wiki_links(HTML, BASE, articles_only=True)
    assert all('File:' not in v.id for v in links)
    assert len(links) == 2


def test_no_content_or_empty_page():
    assert extract_wiki_links('', BASE) == []
    assert extract_wiki_links('<html><body><a href="/wiki/A">A</a></body></html>', BASE) == []
