import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from ..models.quote import Quote
from ..version import get_version_info
from .file_handlers import cleanup_filename, validate_file_type

logger = logging.getLogger(__name__)

BOM_COLUMNS = ['Part Number', 'Description', 'Quantity', 'Unit Cost', 'Total Cost']
CONFIGURATION_COLUMNS = ['Configuration', 'Description', 'Quantity']

# Rows taken by the header block above the BOM table on the summary sheet
SUMMARY_BOM_START_ROW = 18


@dataclass
class QuoteSummary:
    """Consolidated view of a quote for the summary tab and exports"""
    header: Dict[str, Any]
    customer: Dict[str, Any]
    electrical: Dict[str, Any]
    configurations: List[Dict[str, Any]] = field(default_factory=list)
    bom_rows: List[Dict[str, Any]] = field(default_factory=list)
    total_quantity: int = 0
    total_cost: float = 0.0

    @classmethod
    def from_quote(cls, quote: Quote) -> 'QuoteSummary':
        def contact_text(contact):
            return str(contact) if contact else "Not selected"

        specs = quote.electrical_specs
        return cls(
            header={
                'Quote Number': quote.quote_number,
                'Project Name': quote.project_name,
                'Project Number': quote.project_number,
                'Created By': quote.created_by,
                'Created On': quote.created_on.isoformat(),
                'Valid Until': quote.valid_until.isoformat() if quote.valid_until else "",
                'Status': quote.status.value
            },
            customer={
                'Account': quote.account.name if quote.account else "Not selected",
                'Billing Contact': contact_text(quote.billing_contact),
                'Sales Contact': contact_text(quote.sales_contact),
                'Site Contact': contact_text(quote.site_contact)
            },
            electrical={
                'Voltage (V)': specs.voltage,
                'Phases': specs.phases,
                'Frequency (Hz)': specs.frequency,
                'Current (A)': specs.current,
                'Power Factor': specs.power_factor,
                'Calculated Power (kW)': specs.calculated_power,
                'Power Output (kW)': specs.power_output,
                'Efficiency': specs.efficiency
            },
            configurations=[
                {'Configuration': c.name, 'Description': c.description, 'Quantity': c.quantity}
                for c in quote.selected_configurations
            ],
            bom_rows=[
                {
                    'Part Number': line.part_number,
                    'Description': line.description,
                    'Quantity': line.quantity,
                    'Unit Cost': round(line.unit_cost, 2),
                    'Total Cost': round(line.total_cost, 2)
                }
                for line in quote.bill_of_materials
            ],
            total_quantity=quote.total_quantity,
            total_cost=round(quote.total_price, 2)
        )


def bom_dataframe(quote: Quote) -> pd.DataFrame:
    """BOM lines of a quote as a DataFrame"""
    return pd.DataFrame(QuoteSummary.from_quote(quote).bom_rows, columns=BOM_COLUMNS)


def configurations_dataframe(quote: Quote) -> pd.DataFrame:
    return pd.DataFrame(QuoteSummary.from_quote(quote).configurations, columns=CONFIGURATION_COLUMNS)


def default_export_filename(quote: Quote) -> str:
    """Suggested workbook name such as Q-2025-0001_Factory Automation System.xlsx"""
    return cleanup_filename(f"{quote.quote_number}_{quote.project_name}.xlsx")


def export_quote_to_excel(quote: Quote, filepath: str) -> str:
    """
    Export a quote summary to an Excel workbook.

    Args:
        quote: Quote to export
        filepath: Destination .xlsx path

    Returns:
        The path written

    Raises:
        ValueError: If the path is not an .xlsx file
    """
    if not validate_file_type(filepath, ['xlsx']):
        raise ValueError(f"Quote export must be an .xlsx file: {filepath}")

    summary = QuoteSummary.from_quote(quote)
    bom_df = pd.DataFrame(summary.bom_rows, columns=BOM_COLUMNS)
    config_df = pd.DataFrame(summary.configurations, columns=CONFIGURATION_COLUMNS)

    with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
        bom_df.to_excel(writer, sheet_name='Quote Summary', index=False, startrow=SUMMARY_BOM_START_ROW - 1)
        config_df.to_excel(writer, sheet_name='Configurations', index=False)

        summary_sheet = writer.sheets['Quote Summary']
        _write_header_block(summary_sheet, summary)
        _format_table(summary_sheet, bom_df, start_row=SUMMARY_BOM_START_ROW)

        # Totals row under the BOM table
        total_row = SUMMARY_BOM_START_ROW + len(bom_df) + 1
        summary_sheet.cell(row=total_row, column=2, value="Total").font = Font(bold=True)
        summary_sheet.cell(row=total_row, column=3, value=summary.total_quantity).font = Font(bold=True)
        summary_sheet.cell(row=total_row, column=5, value=summary.total_cost).font = Font(bold=True)

        _format_table(writer.sheets['Configurations'], config_df)

    logger.info("Exported quote %s to %s", quote.quote_number, filepath)
    return filepath


def _write_header_block(worksheet, summary: QuoteSummary):
    """Write quote, customer and electrical details above the BOM table"""
    title_font = Font(bold=True, size=14)
    label_font = Font(bold=True)

    worksheet.cell(row=1, column=1, value="Quotation").font = title_font
    worksheet.cell(row=1, column=4, value=get_version_info())

    row = 3
    for label, value in summary.header.items():
        worksheet.cell(row=row, column=1, value=label).font = label_font
        worksheet.cell(row=row, column=2, value=value)
        row += 1

    # Customer and electrical details sit side by side
    row = 3
    for label, value in summary.customer.items():
        worksheet.cell(row=row, column=4, value=label).font = label_font
        worksheet.cell(row=row, column=5, value=value)
        row += 1
    row += 1
    for label, value in summary.electrical.items():
        worksheet.cell(row=row, column=4, value=label).font = label_font
        worksheet.cell(row=row, column=5, value=value)
        row += 1


def _format_table(worksheet, data: pd.DataFrame, start_row: int = 1):
    """
    Style a table written by pandas

    Args:
        worksheet: openpyxl worksheet
        data: DataFrame that was written
        start_row: Row of the header line (1-based)
    """
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="4F81BD", end_color="4F81BD", fill_type="solid")
    centered_alignment = Alignment(horizontal='center')
    border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    for col_num, column_title in enumerate(data.columns, 1):
        cell = worksheet.cell(row=start_row, column=col_num)
        cell.value = column_title
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = centered_alignment
        cell.border = border

    money_columns = [i for i, name in enumerate(data.columns, 1) if 'Cost' in name]

    for row in worksheet.iter_rows(min_row=start_row + 1,
                                   max_row=start_row + len(data),
                                   min_col=1,
                                   max_col=len(data.columns)):
        for cell in row:
            cell.border = border
            if cell.column in money_columns:
                cell.number_format = '"$"#,##0.00'

    # Auto-adjust column width with maximum constraints
    for column in worksheet.columns:
        column_name = get_column_letter(column[0].column)
        max_length = max((len(str(cell.value)) for cell in column if cell.value is not None), default=0)
        worksheet.column_dimensions[column_name].width = max(min(max_length + 2, 50), 10)
