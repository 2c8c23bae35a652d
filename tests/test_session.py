import pytest

from parts_finder.catalog_parser import MissingColumns, SizeExceeded
from parts_finder.search import SearchOptions
from parts_finder.session import IngestionBusy, PartsSession

HEADER = "Item No,Item Description,Item Group,Model,BHL/HLN Flag,HSN Tax,Sale Rate,MRP"


def catalog_csv(*rows: str) -> bytes:
    return "\n".join((HEADER,) + rows).encode("utf-8")


def test_successful_upload_replaces_catalog_and_clears_quotation():
    session = PartsSession()
    session.load_file("first.csv", catalog_csv("A-1,Pump,G,M,F,18,90,100"))
    session.quotation.add(session.catalog[0])
    session.quotation.set_discount(10)

    result = session.load_file("second.csv", catalog_csv("B-1,Valve,G,M,F,18,40,50", "B-2,Hose,G,M,F,18,9,10"))

    assert len(result.records) == 2
    assert [p.item_no for p in session.catalog] == ["B-1", "B-2"]
    assert session.source_name == "second.csv"
    assert len(session.quotation) == 0
    assert session.quotation.discount_pct == 0.0
    assert session.search("B-2")[0].item_description == "Hose"
    assert all(p.item_no != "A-1" for p in session.search("A-1"))


def test_failed_upload_leaves_empty_state():
    session = PartsSession()
    session.load_file("good.csv", catalog_csv("A-1,Pump,G,M,F,18,90,100"))
    session.quotation.add(session.catalog[0])
    session.quotation.set_discount(15)

    with pytest.raises(MissingColumns):
        session.load_file("bad.csv", b"Item No,MRP\nA-2,5")

    assert not session.has_catalog
    assert session.index is None
    assert len(session.quotation) == 0
    assert session.quotation.discount_pct == 0.0
    assert not session.is_loading
    assert session.search("pump") == []


def test_second_load_while_pending_is_rejected():
    session = PartsSession()
    session.begin_load("slow.xlsx")
    assert session.is_loading
    with pytest.raises(IngestionBusy):
        session.begin_load("other.csv")
    session.apply_failure(RuntimeError("cancelled"))
    assert not session.is_loading


def test_search_without_catalog():
    session = PartsSession()
    assert session.search("   ") is None
    assert session.search("pump") == []


def test_changing_search_options_rebuilds_index():
    session = PartsSession()
    session.load_file("parts.csv", catalog_csv("HP-100,Hydraulic Pump,G,M,F,18,90,100"))
    assert session.search("hydrolic")
    session.set_search_options(SearchOptions(threshold=0.0))
    assert session.search("hydrolic") == []
    assert session.index.options.threshold == 0.0


def test_size_limit_is_enforced_per_session():
    session = PartsSession(max_records=1)
    with pytest.raises(SizeExceeded):
        session.load_file("parts.csv", catalog_csv("A-1,P,G,M,F,18,1,2", "A-2,P,G,M,F,18,1,2"))
    assert not session.has_catalog
