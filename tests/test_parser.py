from io import BytesIO

from openpyxl import Workbook
import pytest

from parts_finder.catalog_parser import (
    MAX_CATALOG_SIZE,
    EmptyOrHeaderOnly,
    MalformedFile,
    MissingColumns,
    SizeExceeded,
    UnsupportedFormat,
    ingest_catalog,
)

HEADERS = ["Item No", "Item Description", "Item Group", "Model", "BHL/HLN Flag", "HSN Tax", "Sale Rate", "MRP"]


def workbook_bytes(rows: list[list[object]]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Parts"
    for row in rows:
        ws.append(row)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def delimited_bytes(rows: list[list[str]], delimiter: str = ",") -> bytes:
    return "\n".join(delimiter.join(row) for row in rows).encode("utf-8")


def test_ingest_xlsx_with_reordered_headers_and_extra_columns():
    data = workbook_bytes(
        [
            ["M.R.P.", "Stock", "ITEM NO.", "Description", "Item-Group", "Model", "BHL HLN Flag", "HSN Tax %", "Sale Rate"],
            [250.0, 4, 1001, "Hydraulic Pump", "Pumps", "3DX", "BHL", 18, 199.5],
            [None, None, None, None, None, None, None, None, None],
            ["₹1,250", 0, "AB-123", "Seal Kit", "Seals", "4DX", "HLN", "28%", "1,100"],
        ]
    )

    result = ingest_catalog("Parts Master.xlsx", data)

    assert result.source_name == "Parts Master.xlsx"
    assert result.rows_read == 2
    assert result.ignored_headers == ["Stock"]
    first, second = result.records
    assert first.item_no == "1001"
    assert first.item_description == "Hydraulic Pump"
    assert first.bhl_hln_flag == "BHL"
    assert first.hsn_tax == "18"
    assert first.sale_rate == "199.5"
    assert first.mrp == "250"
    assert second.mrp == "₹1,250"
    assert second.hsn_tax == "28%"


def test_ingest_reports_every_missing_column():
    data = workbook_bytes([["Item No", "Description", "MRP"], ["A1", "Bolt", "10"]])
    with pytest.raises(MissingColumns) as excinfo:
        ingest_catalog("parts.xlsx", data)
    assert excinfo.value.missing == ["item_group", "model", "bhl_hln_flag", "hsn_tax", "sale_rate"]
    assert "item_group, model" in str(excinfo.value)


def test_header_only_workbook_is_rejected():
    with pytest.raises(EmptyOrHeaderOnly):
        ingest_catalog("parts.xlsx", workbook_bytes([HEADERS]))


def test_corrupt_workbook_is_malformed():
    with pytest.raises(MalformedFile):
        ingest_catalog("parts.xlsx", b"definitely not a zip archive")


def test_unsupported_extension():
    with pytest.raises(UnsupportedFormat) as excinfo:
        ingest_catalog("parts.xls", b"")
    assert excinfo.value.extension == ".xls"
    with pytest.raises(UnsupportedFormat):
        ingest_catalog("parts", b"Item No\n")


def test_csv_short_rows_are_padded_with_empty_strings():
    data = delimited_bytes([HEADERS, ["P-1", "Brake Pad", "Brakes"]])
    result = ingest_catalog("parts.csv", data)
    record = result.records[0]
    assert record.item_no == "P-1"
    assert record.item_group == "Brakes"
    assert record.model == ""
    assert record.mrp == ""


def test_csv_quoted_values_keep_their_commas():
    data = (",".join(HEADERS) + '\nP-1,"Filter, air",Filters,3DX,BHL,18,"1,000","1,200"\n').encode("utf-8")
    record = ingest_catalog("parts.csv", data).records[0]
    assert record.item_description == "Filter, air"
    assert record.mrp == "1,200"


def test_tab_separated_content_is_sniffed():
    rows = [HEADERS, ["P-1", "Brake Pad", "Brakes", "3DX", "BHL", "18", "100", "120"]]
    for filename in ("parts.tsv", "parts.csv"):
        result = ingest_catalog(filename, delimited_bytes(rows, "\t"))
        assert result.records[0].item_description == "Brake Pad"
        assert result.records[0].mrp == "120"


def test_csv_falls_back_to_cp1252():
    data = (",".join(HEADERS) + "\nP-1,Caf\xe9 Bracket,Misc,3DX,BHL,18,10,12\n").encode("cp1252")
    assert ingest_catalog("parts.csv", data).records[0].item_description == "Café Bracket"


def test_header_only_csv_is_an_empty_catalog():
    result = ingest_catalog("parts.csv", delimited_bytes([HEADERS]))
    assert result.records == []


def test_empty_csv_lists_all_columns():
    with pytest.raises(MissingColumns) as excinfo:
        ingest_catalog("parts.csv", b"")
    assert len(excinfo.value.missing) == 8


def test_duplicate_item_numbers_keep_last_values_in_first_position():
    data = delimited_bytes(
        [
            HEADERS,
            ["A-1", "Old", "G", "M", "F", "18", "1", "10"],
            ["B-2", "Other", "G", "M", "F", "18", "1", "20"],
            ["A-1", "New", "G", "M", "F", "18", "1", "30"],
        ]
    )
    result = ingest_catalog("parts.csv", data)
    assert [r.item_no for r in result.records] == ["A-1", "B-2"]
    assert result.records[0].item_description == "New"
    assert result.records[0].mrp == "30"
    assert result.duplicates_replaced == 1


def test_size_limit_is_inclusive():
    rows = [HEADERS] + [[f"P-{i}", "Part", "G", "M", "F", "18", "1", "2"] for i in range(4)]
    data = delimited_bytes(rows)
    with pytest.raises(SizeExceeded) as excinfo:
        ingest_catalog("parts.csv", data, max_records=3)
    assert excinfo.value.count == 4
    assert excinfo.value.limit == 3
    assert len(ingest_catalog("parts.csv", data, max_records=4).records) == 4


def test_default_size_limit():
    lines = [",".join(HEADERS)] + [f"P-{i},Part,G,M,F,18,1,2" for i in range(MAX_CATALOG_SIZE)]
    data = "\n".join(lines).encode("utf-8")
    assert len(ingest_catalog("parts.csv", data).records) == MAX_CATALOG_SIZE
    with pytest.raises(SizeExceeded):
        ingest_catalog("parts.csv", data + b"\nP-extra,Part,G,M,F,18,1,2")


def test_only_empty_lines_are_skipped_in_delimited_text():
    text = ",".join(HEADERS) + "\nP-1,Brake Pad,G,M,F,18,1,2\n\n   \n,,,,,,,\nP-2,Air Filter,G,M,F,18,3,4\n"
    result = ingest_catalog("parts.csv", text.encode("utf-8"))
    assert [r.item_no for r in result.records] == ["P-1", "", "P-2"]
    assert result.records[1].item_description == ""
    assert result.records[1].mrp == ""
