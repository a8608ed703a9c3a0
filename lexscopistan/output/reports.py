"""
Lexscopistan — Storage Reports
Spreadsheet and Word document exports of a storage run.
"""

from typing import TYPE_CHECKING
import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor
from openpyxl import Workbook
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

if TYPE_CHECKING:
    from ..economy import EconomyRun

logger = logging.getLogger(__name__)

HEADER_COLOR = "1F4E79"

CROP_HEADERS = ['Container', 'Bushels', 'Sealed', 'Crops']
MINERAL_HEADERS = ['Container', 'Orders', 'Weight (kg)', 'Contents']


def crop_rows(run: "EconomyRun"):
    for container in run.crop_storage.containers:
        types = list(dict.fromkeys(b.type for b in container.bushels))
        yield [container.id, container.count, "Yes" if container.is_full else "No", ", ".join(types)]


def mineral_rows(run: "EconomyRun"):
    for container, metadata in run.facility.items():
        yield [container.id, metadata.order_count, metadata.total_kg, ", ".join(metadata.contents)]


# ============================================================================
# WORKBOOK
# ============================================================================

def _write_sheet(ws, title: str, headers, rows):
    header_fill = PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )

    ws['A1'] = title
    ws['A1'].font = Font(bold=True, size=14)

    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=3, column=col, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.border = thin_border

    for row_idx, row_data in enumerate(rows, 4):
        for col_idx, value in enumerate(row_data, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            cell.border = thin_border

    for col in range(1, len(headers) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 40 if col == len(headers) else 14


def export_workbook(run: "EconomyRun", output_path: str) -> str:
    """Write crop and mineral container sheets to an .xlsx file."""
    wb = Workbook()

    ws1 = wb.active
    ws1.title = "Crop Containers"
    _write_sheet(ws1, f"STACK SKOPE - {len(run.crop_storage.containers)} CONTAINERS",
                 CROP_HEADERS, crop_rows(run))

    ws2 = wb.create_sheet("Mineral Containers")
    _write_sheet(ws2, f"HEAP SKOPE - {run.facility.size} CONTAINERS",
                 MINERAL_HEADERS, mineral_rows(run))

    wb.save(output_path)
    logger.info(f"Workbook exported to {output_path}")
    return output_path


# ============================================================================
# DOCUMENT
# ============================================================================

def _add_container_table(doc, headers, rows):
    """Container table with a shaded header row."""
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = 'Table Grid'

    for cell, header in zip(table.rows[0].cells, headers):
        run = cell.paragraphs[0].add_run(header)
        run.bold = True
        run.font.color.rgb = RGBColor(255, 255, 255)
        shading = OxmlElement('w:shd')
        shading.set(qn('w:fill'), HEADER_COLOR)
        cell._tc.get_or_add_tcPr().append(shading)

    for row_data in rows:
        cells = table.add_row().cells
        for cell, value in zip(cells, row_data):
            cell.text = str(value)

    return table


def export_document(run: "EconomyRun", output_path: str) -> str:
    """Write a storage summary to a .docx file."""
    doc = Document()

    style = doc.styles['Normal']
    style.font.name = 'Calibri'
    style.font.size = Pt(11)

    title = doc.add_heading('LEXSCOPISTAN STORAGE SUMMARY', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_heading('Stack Skope', level=1)
    doc.add_paragraph(
        f"The stack skope stored {run.crop_storage.total_bushels} bushels "
        f"in {len(run.crop_storage.containers)} storage containers."
    )
    _add_container_table(doc, CROP_HEADERS, crop_rows(run))

    doc.add_heading('Heap Skope', level=1)
    doc.add_paragraph(f"The heap skope used {run.facility.size} storage containers.")
    _add_container_table(doc, MINERAL_HEADERS, mineral_rows(run))

    if run.facility.dropped_orders:
        note = doc.add_paragraph()
        note.add_run('Dropped: ').bold = True
        note.add_run(f"{len(run.facility.dropped_orders)} orders "
                     f"({run.facility.dropped_kg} kg) had no container left.")

    doc.save(output_path)
    logger.info(f"Document exported to {output_path}")
    return output_path
