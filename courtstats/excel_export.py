"""Excel workbook export of season totals and the game log."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .constants import GAME_LOG_HEADERS, TOTALS_HEADERS
from .models import Season
from .views import game_log_rows, totals_rows

logger = logging.getLogger('courtstats.excel_export')


def _write_sheet(ws, headers: list[str], rows: list[list]) -> None:
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for row in rows:
        ws.append(row)
    ws.freeze_panes = 'A2'

    for col_idx, header in enumerate(headers, start=1):
        width = max([len(str(header))] + [len(str(r[col_idx - 1])) for r in rows])
        ws.column_dimensions[get_column_letter(col_idx)].width = width + 2


def export_season_workbook(season: Season, excel_path: str | Path) -> Path:
    """
    Write a workbook with 'Totals' and 'Game Log' sheets.

    Args:
        season: Loaded season
        excel_path: Output .xlsx path (parent directories are created)

    Returns:
        Path the workbook was saved to
    """
    excel_path = Path(excel_path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()
    totals_ws = wb.active
    totals_ws.title = 'Totals'
    _write_sheet(totals_ws, TOTALS_HEADERS, totals_rows(season))

    log_ws = wb.create_sheet('Game Log')
    _write_sheet(log_ws, GAME_LOG_HEADERS, game_log_rows(season.games))

    wb.save(excel_path)
    logger.info(f'Season workbook saved to {excel_path}')
    return excel_path
