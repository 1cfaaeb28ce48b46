# utils/kpi_analytics/export.py
"""
KPI Export (CSV / JSON / Excel)

CSV column layout and quoting are fixed; downstream spreadsheets depend on
them. Excel export adds a styled workbook with a summary sheet.

"""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from io import BytesIO
from typing import List, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from openpyxl.utils import get_column_letter

from .constants import CSV_HEADERS, EXPORT_FORMATS, EXCEL_STYLES, CATEGORY_LABELS
from .metrics import KPIMetrics, aggregate, resolve_trend
from .models import KPI

logger = logging.getLogger(__name__)

DEFAULT_FILE_PREFIX = "alajuelita-kpis"


class ExportError(Exception):
    """Raised when a KPI export cannot be produced."""


@dataclass(frozen=True)
class ExportPayload:
    content: Union[str, bytes]
    filename: str
    mime: str

    @property
    def size(self) -> int:
        if isinstance(self.content, bytes):
            return len(self.content)
        return len(self.content.encode('utf-8'))


# =============================================================================
# HELPERS
# =============================================================================

def _format_number(value) -> str:
    """Render numbers the way a browser prints them (85.0 -> '85')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(text: str) -> str:
    # Embedded quotes are doubled so the field stays one CSV cell
    return '"' + str(text).replace('"', '""') + '"'


def build_filename(extension: str, today: Optional[date] = None, prefix: str = DEFAULT_FILE_PREFIX) -> str:
    """`<prefix>-<YYYY-MM-DD>.<ext>` using the UTC date by default."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"{prefix}-{today.isoformat()}.{extension}"


# =============================================================================
# TEXT FORMATS
# =============================================================================

def to_csv(kpis: List[KPI]) -> str:
    """Header row plus one row per KPI, newline-separated, no trailing newline."""
    lines = [",".join(CSV_HEADERS)]
    for kpi in kpis:
        lines.append(",".join([
            _quote(kpi.name),
            _quote(kpi.problem),
            _quote(kpi.solution),
            _quote(kpi.application),
            _quote(kpi.stakeholder_benefits),
            _format_number(kpi.current_value),
            _format_number(kpi.target_value),
            kpi.trend,
            kpi.category,
        ]))
    return "\n".join(lines)


def to_json(kpis: List[KPI], include_charts: bool = False) -> str:
    """
    Pretty-printed JSON array of KPI records.

    With include_charts the array is wrapped together with the chart series:
    {"kpis": [...], "charts": {"series": [...], "distribution": [...]}}
    """
    records = [kpi.to_dict() for kpi in kpis]
    if include_charts:
        return json.dumps({'kpis': records, 'charts': aggregate(kpis)}, indent=2, ensure_ascii=False)
    return json.dumps(records, indent=2, ensure_ascii=False)


# =============================================================================
# EXCEL
# =============================================================================

class KPIExport:
    """
    Excel workbook generator for KPI lists.

    Usage:
        exporter = KPIExport()
        excel_bytes = exporter.create_report(kpis, filter_summary="All districts")

        st.download_button(
            label="Download",
            data=excel_bytes,
            file_name=build_filename("xlsx"),
            mime=EXPORT_FORMATS["xlsx"]["mime"]
        )
    """

    def __init__(self):
        self.wb = None
        self._init_styles()

    def _init_styles(self):
        self.header_fill = PatternFill(
            start_color=EXCEL_STYLES['header_fill_color'],
            end_color=EXCEL_STYLES['header_fill_color'],
            fill_type='solid'
        )
        self.header_font = Font(bold=True, color=EXCEL_STYLES['header_font_color'], size=11)
        self.title_font = Font(bold=True, size=16)
        self.subtitle_font = Font(bold=True, size=12)

        thin = Side(style='thin', color='000000')
        self.cell_border = Border(left=thin, right=thin, top=thin, bottom=thin)

        self.wrap_align = Alignment(wrap_text=True, vertical='top')
        self.center_align = Alignment(horizontal='center', vertical='top')

        self.favorable_fill = PatternFill(
            start_color=EXCEL_STYLES['favorable_fill_color'],
            end_color=EXCEL_STYLES['favorable_fill_color'],
            fill_type='solid'
        )
        self.unfavorable_fill = PatternFill(
            start_color=EXCEL_STYLES['unfavorable_fill_color'],
            end_color=EXCEL_STYLES['unfavorable_fill_color'],
            fill_type='solid'
        )

    def create_report(self, kpis: List[KPI], filter_summary: str = "") -> BytesIO:
        """
        Sheets:
        1. Summary - filters, counts, category distribution
        2. KPIs - one row per KPI
        """
        self.wb = Workbook()

        self._create_summary_sheet(kpis, filter_summary)
        self._create_kpi_sheet(kpis)

        if 'Sheet' in self.wb.sheetnames:
            del self.wb['Sheet']

        output = BytesIO()
        self.wb.save(output)
        output.seek(0)

        logger.info(f"KPI Excel report created ({len(kpis)} rows)")
        return output

    def _create_summary_sheet(self, kpis: List[KPI], filter_summary: str):
        ws = self.wb.create_sheet("Summary", 0)

        ws['A1'] = "Alajuelita KPI Report"
        ws['A1'].font = self.title_font
        ws.merge_cells('A1:C1')

        ws['A2'] = f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        ws['A2'].font = Font(italic=True, size=10)

        ws['A4'] = "Filters:"
        ws['B4'] = filter_summary or "All districts • all categories"

        summary = KPIMetrics(kpis).summarize()
        row = 6
        ws[f'A{row}'] = "SUMMARY"
        ws[f'A{row}'].font = self.subtitle_font
        row += 1

        for label, value in [
            ("KPIs", summary['kpi_count']),
            ("On target", summary['on_target_count']),
            ("Favorable trends", summary['favorable_trends']),
            ("Critical priority", summary['critical_count']),
        ]:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = value
            row += 1

        ws[f'A{row}'] = "Avg achievement"
        if summary['avg_achievement'] is not None:
            ws[f'B{row}'] = summary['avg_achievement']
            ws[f'B{row}'].number_format = EXCEL_STYLES['percent_format']
        row += 2

        ws[f'A{row}'] = "BY CATEGORY"
        ws[f'A{row}'].font = self.subtitle_font
        row += 1
        for col, header in enumerate(["Category", "Count"], 1):
            cell = ws.cell(row=row, column=col, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.border = self.cell_border
        row += 1
        for item in aggregate(kpis)['distribution']:
            ws.cell(row=row, column=1, value=CATEGORY_LABELS.get(item['category'], item['category']))
            ws.cell(row=row, column=2, value=item['count'])
            row += 1

        ws.column_dimensions['A'].width = 22
        ws.column_dimensions['B'].width = 40

    def _create_kpi_sheet(self, kpis: List[KPI]):
        ws = self.wb.create_sheet("KPIs")

        headers = CSV_HEADERS + ['Priority', 'District']
        widths = [28, 40, 40, 40, 40, 10, 10, 10, 14, 10, 16]

        for col, (header, width) in enumerate(zip(headers, widths), 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.border = self.cell_border
            cell.alignment = self.center_align
            ws.column_dimensions[get_column_letter(col)].width = width

        for row_idx, kpi in enumerate(kpis, 2):
            values = [
                kpi.name, kpi.problem, kpi.solution, kpi.application,
                kpi.stakeholder_benefits, kpi.current_value, kpi.target_value,
                kpi.trend, kpi.category, kpi.priority, kpi.district_id,
            ]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row_idx, column=col, value=value)
                cell.border = self.cell_border
                cell.alignment = self.wrap_align
                if col in (6, 7):
                    cell.number_format = EXCEL_STYLES['number_format']

            indicator = resolve_trend(kpi.trend, kpi.category)
            trend_cell = ws.cell(row=row_idx, column=8)
            if indicator.sentiment == 'favorable':
                trend_cell.fill = self.favorable_fill
            elif indicator.sentiment == 'unfavorable':
                trend_cell.fill = self.unfavorable_fill

        ws.freeze_panes = 'B2'


# =============================================================================
# ENTRY POINT
# =============================================================================

def export_data(
    kpis: List[KPI],
    export_format: str,
    include_charts: bool = False,
    filter_summary: str = "",
    today: Optional[date] = None,
    prefix: str = DEFAULT_FILE_PREFIX
) -> ExportPayload:
    """
    Serialize a filtered KPI list.

    Raises:
        ExportError: Unsupported format or serialization failure
    """
    if export_format not in EXPORT_FORMATS:
        raise ExportError(f"Unsupported export format: {export_format}")

    try:
        if export_format == 'csv':
            content = to_csv(kpis)
        elif export_format == 'json':
            content = to_json(kpis, include_charts=include_charts)
        else:
            content = KPIExport().create_report(kpis, filter_summary).getvalue()
    except (TypeError, ValueError) as e:
        raise ExportError(f"Failed to serialize {len(kpis)} KPIs as {export_format}: {e}") from e

    payload = ExportPayload(
        content=content,
        filename=build_filename(export_format, today=today, prefix=prefix),
        mime=EXPORT_FORMATS[export_format]['mime'],
    )
    logger.info(f"📤 Exported {len(kpis)} KPIs as {payload.filename} ({payload.size} bytes)")
    return payload
