"""
Output processing utilities for the generated record set
Builds the on-page table and the downloadable CSV / Excel payloads
"""

import logging
from dataclasses import dataclass
from typing import Dict, Sequence

import pandas as pd

from models.record import RECORD_FIELDS, Record

logger = logging.getLogger(__name__)

CSV = "csv"
EXCEL = "excel"


@dataclass(frozen=True)
class ExportFormat:
    filename: str
    mime: str


# Fixed filenames; the "Excel" file is tab-separated text with a spreadsheet extension
EXPORT_FORMATS: Dict[str, ExportFormat] = {
    CSV: ExportFormat("cnpj-data.csv", "text/csv"),
    EXCEL: ExportFormat("cnpj-data.xlsx", "application/vnd.ms-excel"),
}


class ExportError(ValueError):
    """Raised when there is nothing to export"""


@dataclass(frozen=True)
class ExportFile:
    content: str
    filename: str
    mime: str


class OutputProcessor:
    """
    Formats records for display and export
    """

    def to_dataframe(self, records: Sequence[Record]) -> pd.DataFrame:
        """
        One row per record, columns in export order.
        Every column is kept as text so CNPJs keep their leading zeros.
        """
        rows = [record.to_row() for record in records]
        return pd.DataFrame(rows, columns=list(RECORD_FIELDS), dtype=str)

    def to_csv(self, records: Sequence[Record]) -> str:
        """
        Comma-delimited, every value double-quoted, header unquoted.
        Quotes inside values are not escaped.
        """
        lines = [",".join(RECORD_FIELDS)]
        for record in records:
            row = record.to_row()
            lines.append(",".join(f'"{row[name]}"' for name in RECORD_FIELDS))
        return "\n".join(lines)

    def to_tsv(self, records: Sequence[Record]) -> str:
        """Tab-delimited, unquoted"""
        lines = ["\t".join(RECORD_FIELDS)]
        for record in records:
            row = record.to_row()
            lines.append("\t".join(row[name] for name in RECORD_FIELDS))
        return "\n".join(lines)

    def export(self, records: Sequence[Record], mode: str) -> ExportFile:
        if mode not in EXPORT_FORMATS:
            raise ValueError(f"Unknown export mode: {mode!r}")

        if not records:
            raise ExportError("Nenhum dado para exportar.")

        fmt = EXPORT_FORMATS[mode]
        content = self.to_csv(records) if mode == CSV else self.to_tsv(records)

        logger.debug("Prepared %s export: %d records -> %s", mode, len(records), fmt.filename)
        return ExportFile(content=content, filename=fmt.filename, mime=fmt.mime)
