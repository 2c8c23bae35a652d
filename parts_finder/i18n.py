from __future__ import annotations


LANGUAGES = ("en", "nl")

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "lang_name_en": "English",
        "lang_name_nl": "Dutch",
        "window_title": "Parts Finder v{version}",
        "app_heading": "Parts Finder",
        "btn_upload": "Upload",
        "btn_quotation": "Quotation",
        "btn_quotation_count": "Quotation ({count})",
        "btn_settings": "Settings",
        "btn_search": "Search",
        "btn_clear": "Clear",
        "btn_close": "Close",
        "btn_add": "Add",
        "btn_added": "Added",
        "welcome_msg": "Please upload a parts data file to begin.",
        "upload_dialog_title": "Upload parts data",
        "upload_file_filter": "Parts data (*.csv *.tsv *.xlsx)",
        "upload_progress_title": "Loading parts",
        "upload_progress_msg": "Parsing your file...",
        "upload_success": "{count} parts uploaded successfully.",
        "upload_success_duplicates": "{count} parts uploaded successfully ({duplicates} duplicate item numbers replaced).",
        "upload_failed": "Upload failed: {error}",
        "search_placeholder": "Search by Item No. or Description...",
        "results_heading": "Search Results ({count})",
        "results_none": "No matching parts found. Try a different search term or check your data file.",
        "col_item_no": "Item No.",
        "col_description": "Description",
        "col_group": "Item Group",
        "col_model": "Model",
        "col_flag": "BHL/HLN Flag",
        "col_hsn": "HSN Tax %",
        "col_sale_rate": "Sale Rate",
        "col_mrp": "MRP",
        "quote_title": "Quotation",
        "quote_empty": "Your quotation is empty. Add parts from the search results to get started.",
        "quote_col_part": "Part",
        "quote_col_mrp": "MRP",
        "quote_col_qty": "Qty",
        "quote_col_total": "Total",
        "quote_discount": "Discount (%)",
        "quote_subtotal": "Subtotal",
        "quote_discount_amount": "Discount",
        "quote_total": "Total",
        "quote_clear_title": "Clear quotation",
        "quote_clear_msg": "Remove all parts from the quotation?",
        "settings_title": "Settings",
        "settings_dark_mode": "Dark mode",
        "settings_language": "Language",
        "settings_threshold": "Search tolerance",
        "settings_min_length": "Minimum match length",
        "settings_help_threshold": "0 only accepts perfect matches, 1 accepts anything.",
        "settings_save": "Save",
        "settings_cancel": "Cancel",
        "ingest_error_generic": "The file could not be loaded.",
        "ingest_error_unsupported": "File format not supported ({extension}). Please upload CSV, TSV, or Excel.",
        "ingest_error_empty": "File is empty or contains only headers.",
        "ingest_error_missing_columns": "Missing required columns: {columns}",
        "ingest_error_malformed": "Failed to parse file: {detail}",
        "ingest_error_size": "File contains {count} items, exceeding the limit of {limit}.",
    },
    "nl": {
        "lang_name_en": "Engels",
        "lang_name_nl": "Nederlands",
        "window_title": "Parts Finder v{version}",
        "app_heading": "Parts Finder",
        "btn_upload": "Uploaden",
        "btn_quotation": "Offerte",
        "btn_quotation_count": "Offerte ({count})",
        "btn_settings": "Instellingen",
        "btn_search": "Zoeken",
        "btn_clear": "Wissen",
        "btn_close": "Sluiten",
        "btn_add": "Toevoegen",
        "btn_added": "Toegevoegd",
        "welcome_msg": "Upload een onderdelenbestand om te beginnen.",
        "upload_dialog_title": "Onderdelen uploaden",
        "upload_file_filter": "Onderdelenbestand (*.csv *.tsv *.xlsx)",
        "upload_progress_title": "Onderdelen laden",
        "upload_progress_msg": "Bestand wordt verwerkt...",
        "upload_success": "{count} onderdelen succesvol geladen.",
        "upload_success_duplicates": "{count} onderdelen succesvol geladen ({duplicates} dubbele artikelnummers vervangen).",
        "upload_failed": "Uploaden mislukt: {error}",
        "search_placeholder": "Zoek op artikelnummer of omschrijving...",
        "results_heading": "Zoekresultaten ({count})",
        "results_none": "Geen onderdelen gevonden. Probeer een andere zoekterm of controleer het bestand.",
        "col_item_no": "Artikelnr.",
        "col_description": "Omschrijving",
        "col_group": "Artikelgroep",
        "col_model": "Model",
        "col_flag": "BHL/HLN-vlag",
        "col_hsn": "HSN-belasting %",
        "col_sale_rate": "Verkoopprijs",
        "col_mrp": "Adviesprijs",
        "quote_title": "Offerte",
        "quote_empty": "De offerte is leeg. Voeg onderdelen toe vanuit de zoekresultaten.",
        "quote_col_part": "Onderdeel",
        "quote_col_mrp": "Adviesprijs",
        "quote_col_qty": "Aantal",
        "quote_col_total": "Totaal",
        "quote_discount": "Korting (%)",
        "quote_subtotal": "Subtotaal",
        "quote_discount_amount": "Korting",
        "quote_total": "Totaal",
        "quote_clear_title": "Offerte wissen",
        "quote_clear_msg": "Alle onderdelen uit de offerte verwijderen?",
        "settings_title": "Instellingen",
        "settings_dark_mode": "Donkere modus",
        "settings_language": "Taal",
        "settings_threshold": "Zoektolerantie",
        "settings_min_length": "Minimale zoeklengte",
        "settings_help_threshold": "0 accepteert alleen exacte treffers, 1 accepteert alles.",
        "settings_save": "Opslaan",
        "settings_cancel": "Annuleren",
        "ingest_error_generic": "Het bestand kon niet worden geladen.",
        "ingest_error_unsupported": "Bestandsformaat niet ondersteund ({extension}). Upload CSV, TSV of Excel.",
        "ingest_error_empty": "Bestand is leeg of bevat alleen kolomkoppen.",
        "ingest_error_missing_columns": "Verplichte kolommen ontbreken: {columns}",
        "ingest_error_malformed": "Bestand kon niet worden gelezen: {detail}",
        "ingest_error_size": "Bestand bevat {count} artikelen, meer dan de limiet van {limit}.",
    },
}


def normalize_language(language: str) -> str:
    lang = str(language or "en").lower().strip()
    return lang if lang in LANGUAGES else "en"


def tr(language: str, key: str, **kwargs) -> str:
    lang = normalize_language(language)
    value = TRANSLATIONS.get(lang, {}).get(key) or TRANSLATIONS["en"].get(key) or key
    try:
        return value.format(**kwargs)
    except Exception:
        return value


def tr_error(language: str, error: Exception) -> str:
    key = getattr(error, "message_key", None)
    if not key:
        return str(error)
    return tr(language, key, **getattr(error, "message_args", {}))
