"""
Report output: CSV export and paginated report pages.

CSV uses ``;`` as separator (Excel in pt-BR opens it directly) and starts
with a UTF-8 BOM. Pages hold a fixed number of rows, 12 by default.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from rich.table import Table

from ..config import logger as log
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..container import get_container
from ..domain.company import Company
from .results import OperationResult

SEPARATOR = ";"
BOM = "\ufeff"
FOOTER_SUFFIX = "Desenvolvido por MRP Sistemas & Codix Digital"

NO_DATA_EXPORT = "Não há dados para exportar."
NO_DATA_SHARE = "Não há dados para compartilhar."


def escape_csv_field(value: Any) -> str:
    """Quotes a field containing ``;``, ``"`` or a newline; doubles inner quotes."""
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    if SEPARATOR in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def to_csv(rows: list[dict]) -> str:
    """CSV text with a header row taken from the first row's keys."""
    if not rows:
        return ""
    headers = list(rows[0].keys())
    lines = [SEPARATOR.join(headers)]
    lines.extend(SEPARATOR.join(escape_csv_field(row.get(h)) for h in headers) for row in rows)
    return BOM + "\n".join(lines)


def export_csv(rows: list[dict], path: Union[str, Path]) -> OperationResult:
    if not rows:
        return OperationResult(False, NO_DATA_EXPORT)
    path = Path(path)
    path.write_text(to_csv(rows), encoding="utf-8")
    log.info("reports", "CSV exported", path=str(path), rows=len(rows))
    return OperationResult(True, "", path)


# =============================================================================
# PAGINATED REPORTS
# =============================================================================


@dataclass(frozen=True)
class ReportColumn:
    header: str
    accessor: str
    format: Optional[Callable[[Any, dict], str]] = None
    align: str = "left"

    def cell(self, row: dict) -> str:
        value = row.get(self.accessor)
        if self.format is not None:
            return self.format(value, row)
        return "" if value is None else str(value)


@dataclass(frozen=True)
class ReportPage:
    number: int
    total_pages: int
    rows: list[dict]

    @property
    def footer(self) -> str:
        return f"Página {self.number} de {self.total_pages} - {FOOTER_SUFFIX}"


def items_per_page() -> int:
    return get_container().config.get_int(
        ConfigKeys.REPORT_ITEMS_PER_PAGE, ConfigDefaults.REPORT_ITEMS_PER_PAGE
    )


def paginate(rows: list[dict], per_page: Optional[int] = None) -> list[ReportPage]:
    per_page = per_page or items_per_page()
    total = math.ceil(len(rows) / per_page)
    return [
        ReportPage(number=i + 1, total_pages=total, rows=rows[i * per_page:(i + 1) * per_page])
        for i in range(total)
    ]


def render_page(
    page: ReportPage,
    columns: list[ReportColumn],
    title: str,
    company: Optional[Company] = None,
    generated_at: Optional[datetime] = None,
) -> Table:
    """One report page as a rich table, ready for ``Console.print``."""
    generated_at = generated_at or datetime.now()
    caption = f"Gerado em: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}"
    if company is not None:
        caption = f"{company.name} - {company.address}\n{caption}"

    table = Table(title=title, caption=f"{caption}\n{page.footer}", expand=True)
    for column in columns:
        table.add_column(column.header, justify=column.align)
    for row in page.rows:
        table.add_row(*(column.cell(row) for column in columns))
    return table


def paginated_report(
    rows: list[dict],
    columns: list[ReportColumn],
    title: str,
    company: Optional[Company] = None,
    per_page: Optional[int] = None,
) -> OperationResult:
    """Builds every page of a report; ``record`` holds the rich tables."""
    if not rows:
        return OperationResult(False, NO_DATA_SHARE)
    pages = paginate(rows, per_page)
    tables = [render_page(page, columns, title, company) for page in pages]
    log.info("reports", "Report paginated", title=title, rows=len(rows), pages=len(pages))
    return OperationResult(True, "", tables)
