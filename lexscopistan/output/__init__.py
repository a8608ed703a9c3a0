"""
Lexscopistan — Output Package
Text summaries and file exports.
"""

from .summary import SummaryPresenter
from .reports import export_workbook, export_document

__all__ = [
    'SummaryPresenter',
    'export_workbook',
    'export_document',
]
