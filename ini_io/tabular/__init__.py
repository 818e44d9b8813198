"""Adaptateurs tabulaires (tables Name/Value et CSV)."""

from ini_io.tabular.csv_adapter import table_from_csv, table_to_csv
from ini_io.tabular.table import (
    Table,
    document_from_tables,
    document_to_tables,
    section_from_table,
    section_to_table,
)

__all__ = [
    "Table",
    "section_to_table",
    "section_from_table",
    "document_to_tables",
    "document_from_tables",
    "table_to_csv",
    "table_from_csv",
]
