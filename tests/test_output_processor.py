"""Tests for the table and export formatting."""

from __future__ import annotations

import pytest

from models.record import RECORD_FIELDS, Record
from utils.output_processor import CSV, EXCEL, ExportError, OutputProcessor


@pytest.fixture()
def processor() -> OutputProcessor:
    return OutputProcessor()


class TestDataFrame:

    def test_columns_and_rows(self, processor: OutputProcessor, sample_records: list[Record]):
        df = processor.to_dataframe(sample_records)
        assert list(df.columns) == list(RECORD_FIELDS)
        assert len(df) == 2
        assert df.iloc[1]["vendorAccountId"] == "04252011000110"
        assert df.iloc[0]["user"] == "ana@empresa.com"

    def test_empty(self, processor: OutputProcessor):
        df = processor.to_dataframe([])
        assert df.empty
        assert list(df.columns) == list(RECORD_FIELDS)

    def test_markup_is_kept_as_plain_text(self, processor: OutputProcessor):
        record = Record("<b>x</b>@a.com", "BR", "11222333000181", "v", "<SCRIPT>", "ADD")
        df = processor.to_dataframe([record])
        assert df.iloc[0]["user"] == "<b>x</b>@a.com"
        assert df.iloc[0]["vendorName"] == "<SCRIPT>"


class TestCsv:

    def test_layout(self, processor: OutputProcessor, sample_records: list[Record]):
        lines = processor.to_csv(sample_records).split("\n")
        assert lines[0] == "user,country,vendorAccountId,vendorId,vendorName,action"
        assert lines[1] == (
            '"ana@empresa.com","BR","11222333000181",'
            '"7312b2db-b028-4bd9-9d8a-a8cfa006029e","AMBEV","ADD"'
        )
        assert len(lines) == 3

    def test_no_trailing_newline(self, processor: OutputProcessor, sample_records: list[Record]):
        assert not processor.to_csv(sample_records).endswith("\n")

    def test_embedded_quotes_are_not_escaped(self, processor: OutputProcessor):
        record = Record("a@b.com", "BR", "11222333000181", "v", 'ACME "SA"', "ADD")
        assert processor.to_csv([record]).split("\n")[1].endswith('"ACME "SA"","ADD"')


class TestTsv:

    def test_layout(self, processor: OutputProcessor, sample_records: list[Record]):
        lines = processor.to_tsv(sample_records).split("\n")
        assert lines[0] == "user\tcountry\tvendorAccountId\tvendorId\tvendorName\taction"
        assert lines[2] == "joao@empresa.com\tBR\t04252011000110\t7312b2db-b028-4bd9-9d8a-a8cfa006029e\tAMBEV\tADD"


class TestExport:

    def test_csv_file(self, processor: OutputProcessor, sample_records: list[Record]):
        export_file = processor.export(sample_records, CSV)
        assert export_file.filename == "cnpj-data.csv"
        assert export_file.mime == "text/csv"
        assert export_file.content == processor.to_csv(sample_records)

    def test_excel_file_is_tab_text(self, processor: OutputProcessor, sample_records: list[Record]):
        export_file = processor.export(sample_records, EXCEL)
        assert export_file.filename == "cnpj-data.xlsx"
        assert export_file.mime == "application/vnd.ms-excel"
        assert export_file.content == processor.to_tsv(sample_records)

    def test_empty_raises(self, processor: OutputProcessor):
        with pytest.raises(ExportError, match="Nenhum dado para exportar."):
            processor.export([], CSV)

    def test_unknown_mode(self, processor: OutputProcessor, sample_records: list[Record]):
        with pytest.raises(ValueError, match="Unknown export mode"):
            processor.export(sample_records, "pdf")
