"""Row/cell scanner for spreadsheet-style catalog markup.

Manufacturer catalogs arrive as SpreadsheetML-like markup: ``<Row>``
blocks holding ``<Cell><Data>text</Data></Cell>`` blocks. The dialect is
loosely structured and often not well-formed as a whole, so rows and
cells are located with patterns rather than a document parser.

The first row yielding any cell text supplies the column headers. Every
later row yielding cell text becomes a mapping from header to text.
"""

from __future__ import annotations

import html
import logging
import re

logger = logging.getLogger(__name__)

MarkupRow = dict[str, str]
MarkupTable = list[MarkupRow]

_ROW_PATTERN = re.compile(r"<Row\b[^>]*(?<!/)>(.*?)</Row>", re.DOTALL)
_CELL_PATTERN = re.compile(
    r"<Cell\b[^>]*>.*?<Data\b[^>]*>(.*?)</Data>.*?</Cell>", re.DOTALL
)


class TabularMarkupScanner:
    """Extracts a header-keyed table from catalog markup."""

    def scan(self, markup: str) -> MarkupTable:
        """Scan markup into a list of header-keyed rows.

        Args:
            markup: Markup text containing zero or more row blocks.

        Returns:
            Data rows in document order. The header row is not included.
            Rows without cells, or whose cells all fall outside the header
            columns, are skipped.
        """
        table: MarkupTable = []
        headers: list[str] | None = None

        for row_match in _ROW_PATTERN.finditer(markup):
            cells = self.scan_cells(row_match.group(1))
            if not cells:
                continue

            if headers is None:
                headers = cells
                continue

            row: MarkupRow = {}
            for index, cell in enumerate(cells[: len(headers)]):
                if headers[index]:
                    row[headers[index]] = cell
            if row:
                table.append(row)

        logger.info(
            f"Parsed {len(table)} rows from markup with headers: "
            f"{', '.join((headers or [])[:10])}"
        )
        return table

    @staticmethod
    def scan_cells(row_content: str) -> list[str]:
        """Return the trimmed cell texts of one row, in order.

        Each call starts a new scan at the start of ``row_content``; no
        match position carries over from a previous row.
        Named and numeric character references are decoded, so ``&#10;``
        line breaks inside a cell come back as newlines.
        """
        return [
            html.unescape(match.group(1).strip())
            for match in _CELL_PATTERN.finditer(row_content)
        ]
