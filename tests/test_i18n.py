from parts_finder.catalog_parser import MissingColumns, SizeExceeded
from parts_finder.i18n import TRANSLATIONS, normalize_language, tr, tr_error


def test_languages_share_the_same_keys():
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["nl"])


def test_normalize_language():
    assert normalize_language("NL ") == "nl"
    assert normalize_language("fr") == "en"
    assert normalize_language("") == "en"


def test_tr_formats_and_falls_back_to_key():
    assert tr("en", "results_heading", count=3) == "Search Results (3)"
    assert tr("nl", "btn_quotation_count", count=2) == "Offerte (2)"
    assert tr("en", "no_such_key") == "no_such_key"


def test_tr_error_uses_error_arguments():
    error = MissingColumns(["model", "mrp"])
    assert tr_error("en", error) == "Missing required columns: model, mrp"
    assert tr_error("nl", SizeExceeded(70000, 65000)).startswith("Bestand bevat 70000")
    assert tr_error("en", ValueError("boom")) == "boom"
