"""namegen.jp name source implementing NameSource.

Scrapes the random-name table from https://namegen.jp. Each body row of
``table.gen-table-1`` looks like::

    <tr>
      <td class="name">山田 <br>太郎</td>
      <td class="pron">やまだ たろう</td>
      ...
    </tr>

The page markup is not an API: if it changes, every fetch fails with
FetchFailure rather than returning partial data.
"""

import logging
import re

from lxml import etree, html

from ..domain.errors import FetchFailure, NotHiragana
from ..domain.models import Name, Sex
from .http_client import HttpClient

logger = logging.getLogger(__name__)

URL_TEMPLATE = (
    "https://namegen.jp/?country=japan&sex={sex}"
    "&middlename=&middlename_cond=fukumu"
    "&middlename_rarity=&middlename_rarity_cond=ika"
    "&lastname=&lastname_cond=fukumu"
    "&lastname_rarity=&lastname_rarity_cond=ika&lastname_type=name"
    "&firstname=&firstname_cond=fukumu"
    "&firstname_rarity=&firstname_rarity_cond=ika&firstname_type=name"
)

_TABLE_XPATH = (
    "//table[contains(concat(' ', normalize-space(@class), ' '), ' gen-table-1 ')]"
)
_ROW_XPATH = ".//tr"
_NAME_CELL_XPATH = ".//td[contains(concat(' ', normalize-space(@class), ' '), ' name ')]"
_PRON_CELL_XPATH = ".//td[contains(concat(' ', normalize-space(@class), ' '), ' pron ')]"

_PRON_SEPARATOR = re.compile(r"[\s/／　]+")


def build_url(sex: Sex) -> str:
    return URL_TEMPLATE.format(sex=sex.value)


# ------------------------------------------------------------------ #
#  Parsing                                                              #
# ------------------------------------------------------------------ #


def _first(elements, what: str):
    if not elements:
        raise FetchFailure(f"{what} not found")
    return elements[0]


def _parse_row(row, index: int) -> Name:
    name_cell = _first(row.xpath(_NAME_CELL_XPATH), f"td.name in row {index}")
    sei_mei = [seg for t in name_cell.xpath(".//text()") for seg in t.split()]
    if len(sei_mei) != 2:
        raise FetchFailure(
            f"row {index}: expected 2 name segments, got {len(sei_mei)}: {sei_mei!r}"
        )

    pron_cell = _first(row.xpath(_PRON_CELL_XPATH), f"td.pron in row {index}")
    sei_mei_kana = [s for s in _PRON_SEPARATOR.split(pron_cell.text_content()) if s]
    if len(sei_mei_kana) != 2:
        raise FetchFailure(
            f"row {index}: expected 2 kana segments, got {len(sei_mei_kana)}: "
            f"{sei_mei_kana!r}"
        )

    try:
        return Name(
            last_name=sei_mei[0],
            last_name_kana=sei_mei_kana[0],
            first_name=sei_mei[1],
            first_name_kana=sei_mei_kana[1],
        )
    except NotHiragana as exc:
        raise FetchFailure(f"row {index}: {exc}") from exc


def parse_names(document: str) -> list[Name]:
    """Extract every name from a namegen.jp result page.

    The header row is skipped and the remaining rows are returned in page
    order. Any malformed row fails the whole parse.

    Raises:
        FetchFailure: If the table is missing, empty, or any row is malformed.
    """
    if not document or not document.strip():
        raise FetchFailure("empty document")
    try:
        root = html.fromstring(document)
    except (etree.ParserError, ValueError) as exc:
        raise FetchFailure(f"unparseable document: {exc}") from exc

    table = _first(root.xpath(_TABLE_XPATH), "table.gen-table-1")
    rows = table.xpath(_ROW_XPATH)[1:]  # header
    names = [_parse_row(row, i) for i, row in enumerate(rows, start=1)]
    if not names:
        raise FetchFailure("table.gen-table-1 has no name rows")
    return names


# ------------------------------------------------------------------ #
#  Source                                                               #
# ------------------------------------------------------------------ #


class NamegenSource:
    """Fetches name lists from namegen.jp.

    Implements the ``NameSource`` protocol.
    """

    def __init__(self, max_retries: int = 1, timeout: float = 30):
        self._http = HttpClient(max_retries=max_retries, timeout=timeout)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def fetch(self, sex: Sex) -> list[Name]:
        """Fetch and parse the current name list for ``sex``.

        Raises:
            FetchFailure: On network error, non-success status or bad markup.
        """
        url = build_url(sex)
        try:
            document = self._http.get_text(url)
        except RuntimeError as exc:
            raise FetchFailure(f"namegen.jp request failed: {exc}") from exc

        names = parse_names(document)
        logger.info("Fetched %d %s names from namegen.jp", len(names), sex.value)
        return names
