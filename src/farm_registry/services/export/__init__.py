"""Export services."""

from .excel import (
    FARMER_COLUMNS,
    TRADE_COLUMNS,
    XLSX_MEDIA_TYPE,
    build_farmer_workbook,
    build_trade_workbook,
)

__all__ = [
    "FARMER_COLUMNS",
    "TRADE_COLUMNS",
    "XLSX_MEDIA_TYPE",
    "build_farmer_workbook",
    "build_trade_workbook",
]
