# table_parser.py
# -------------------------------------------------------------------
# Turn the internship README table into JobRecords.
# Two layouts show up in the wild: HTML rows (<tr>/<td>) embedded in
# the markdown, and plain pipe tables. The layout is picked once per
# document; rows are then folded left to right so "↳" rows can borrow
# the company of the row above.
# -------------------------------------------------------------------

import re
from enum import Enum
from itertools import takewhile
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup

from job_models import JobRecord

CONTINUATION_MARKER = "↳"
CLOSED_SENTINEL = "🔒"
AGGREGATOR_HOST = "simplify.jobs"
TRACKING_PARAM = "utm_source"
SOURCE = "GitHub"

# legend glyphs the lists sprinkle next to roles/companies
DECORATIONS = ("🔥", "🛂", "🇺🇸", "🎓", "🔒", "\ufe0f")
# &amp; last so "&amp;lt;" stays "&lt;"
ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&nbsp;", " "),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)

TAG_RX = re.compile(r"<[^>]*>")
IMAGE_RX = re.compile(r"!\[[^\]]*\]\([^)]*\)")
IMAGE_LINK_RX = re.compile(r"\[!\[[^\]]*\]\([^)]*\)\]\((https?://[^)\s]+)\)")
MD_LINK_RX = re.compile(r"\[([^\]]*)\]\((https?://[^)\s]+)\)")
# <a> tag (body included when closed) or markdown link; group 2 is the markdown URL
LINK_TOKEN_RX = re.compile(r"<a\b[^>]*>(?:.*?</a>)?|" + MD_LINK_RX.pattern, re.I | re.S)
BOLD_RX = re.compile(r"(\*\*|__)(.+?)\1")
WS_RX = re.compile(r"\s+")
BREAK_RX = re.compile(r"</br>|<br\s*/?>|\n", re.I)
DETAILS_RX = re.compile(
    r"<details>\s*<summary>(?:(?!</summary>).)*?\d+\s+locations(?:(?!</summary>).)*</summary>"
    r"(.*?)</details>",
    re.I | re.S,
)
TRACKING_RX = re.compile(r"[?&]" + TRACKING_PARAM)

ROW_RX = re.compile(r"<tr(?:\s[^>]*)?>(.*?)</tr>", re.I | re.S)
CELL_RX = re.compile(r"<td(?:\s[^>]*)?>(.*?)</td>", re.I | re.S)
HEADER_CELL_RX = re.compile(r"<th[\s>]", re.I)
SEPARATOR_RX = re.compile(r"^\|?[\s:|-]*-[\s:|-]*$")


class Dialect(Enum):
    HTML = "html"
    MARKDOWN = "markdown"


# ---------------------------- text helpers ----------------------------- #
def normalize_images(line: str) -> str:
    # [![Apply](img)](url) -> [Apply](url), so the apply URL survives
    line = IMAGE_LINK_RX.sub(r"[Apply](\1)", line)
    return IMAGE_RX.sub(" ", line)


def clean_text(text: str) -> str:
    """Plain, single-spaced text from a cell: no tags, links, bold or legend glyphs."""
    if not text:
        return ""
    text = normalize_images(text)
    text = MD_LINK_RX.sub(r"\1", text)
    text = TAG_RX.sub(" ", text)
    text = BOLD_RX.sub(r"\2", text)
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    for glyph in DECORATIONS:
        text = text.replace(glyph, "")
    return WS_RX.sub(" ", text).strip()


def _anchors(cell: str) -> List[Tuple[str, str]]:
    """(text, href) for each <a href> in the cell, entities decoded."""
    if "<a" not in cell.lower():
        return []
    soup = BeautifulSoup(cell, "html.parser")
    return [
        (a.get_text(" ", strip=True), str(a["href"]).strip())
        for a in soup.find_all("a", href=True)
    ]


def _hrefs_in_order(cell: str) -> List[str]:
    hrefs: List[str] = []
    for m in LINK_TOKEN_RX.finditer(normalize_images(cell)):
        if m.group(2):
            hrefs.append(m.group(2))
        else:
            hrefs += [href for _, href in _anchors(m.group(0))]
    return hrefs


def _strip_tracking(url: str) -> str:
    return TRACKING_RX.split(url, maxsplit=1)[0]


# ---------------------------- cell extractors -------------------------- #
def extract_company(cell: str) -> str:
    """Company name, or CONTINUATION_MARKER when the row repeats the previous one."""
    if clean_text(cell) == CONTINUATION_MARKER:
        return CONTINUATION_MARKER
    for text, _ in _anchors(cell):
        name = clean_text(text)
        if name:
            return name
    m = MD_LINK_RX.search(normalize_images(cell))
    if m and clean_text(m.group(1)):
        return clean_text(m.group(1))
    return clean_text(cell)


def extract_role(cell: str) -> str:
    return clean_text(cell)


def extract_location(cell: str) -> str:
    m = DETAILS_RX.search(cell)
    body = m.group(1) if m else cell
    places = [clean_text(p) for p in BREAK_RX.split(body)]
    return ", ".join(p for p in places if p)


def extract_link(cell: str) -> str:
    """
    Application URL for the row. Direct employer links win over the
    aggregator link; CLOSED_SENTINEL comes back verbatim for locked rows.
    """
    if CLOSED_SENTINEL in cell:
        return CLOSED_SENTINEL
    hrefs = [h for h in _hrefs_in_order(cell) if h.lower().startswith(("http://", "https://"))]
    if not hrefs:
        return ""
    direct = next((h for h in hrefs if AGGREGATOR_HOST not in h.lower()), "")
    return _strip_tracking(direct or hrefs[0])


# ---------------------------- row readers ------------------------------ #
def detect_dialect(text: str) -> Dialect:
    return Dialect.HTML if re.search(r"<tr[\s>]", text, re.I) else Dialect.MARKDOWN


def _html_rows(text: str) -> Iterator[List[str]]:
    for m in ROW_RX.finditer(text):
        row = m.group(1)
        if HEADER_CELL_RX.search(row):
            continue
        yield [c.strip() for c in CELL_RX.findall(row)]


def _split_pipes(line: str) -> List[str]:
    cells = [c.strip() for c in line.strip().split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def _is_markdown_header(line: str) -> bool:
    if not line.startswith("|"):
        return False
    names = {clean_text(c).lower() for c in _split_pipes(line)}
    return "company" in names and "role" in names


def _markdown_rows(text: str) -> Iterator[List[str]]:
    lines = [ln.strip() for ln in text.splitlines()]
    start = next((i for i, ln in enumerate(lines) if _is_markdown_header(ln)), None)
    if start is None:
        # no header at all: take every pipe row we can find
        body = [ln for ln in lines if ln.startswith("|")]
    else:
        body = list(takewhile(lambda ln: ln.startswith("|"), lines[start + 1 :]))
    for line in body:
        if SEPARATOR_RX.match(line):
            continue
        yield _split_pipes(line)


ROW_READERS: Dict[Dialect, Callable[[str], Iterator[List[str]]]] = {
    Dialect.HTML: _html_rows,
    Dialect.MARKDOWN: _markdown_rows,
}


def iter_rows(text: str, dialect: Optional[Dialect] = None) -> Iterator[List[str]]:
    return ROW_READERS[dialect or detect_dialect(text)](text)


# ---------------------------- assembly --------------------------------- #
def _fold_row(
    cells: List[str], last_company: str
) -> Tuple[Optional[JobRecord], str]:
    """One row in, (record or None, company to carry into the next row) out."""
    if len(cells) < 4:
        return None, last_company

    company_cell, role_cell, location_cell, link_cell = cells[:4]
    date_cell = cells[4] if len(cells) > 4 else ""

    company = extract_company(company_cell)
    if company in (CONTINUATION_MARKER, ""):
        company = last_company
    else:
        last_company = company

    role = extract_role(role_cell)
    link = extract_link(link_cell)
    if not company or not role or not link or link == CLOSED_SENTINEL:
        return None, last_company

    job = JobRecord(
        company=company,
        role=role,
        location=extract_location(location_cell),
        link=link,
        date_posted=clean_text(date_cell),
        source=SOURCE,
    )
    return job, last_company


def parse_table(text: str, dialect: Optional[Dialect] = None) -> List[JobRecord]:
    jobs: List[JobRecord] = []
    last_company = ""
    for cells in iter_rows(text or "", dialect):
        job, last_company = _fold_row(cells, last_company)
        if job:
            jobs.append(job)
    return jobs
