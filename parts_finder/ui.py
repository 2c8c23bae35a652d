from __future__ import annotations

from pathlib import Path
import sys
import threading

from PySide6.QtCore import QEasingCurve, QParallelAnimationGroup, QPoint, QPropertyAnimation, QTimer, Qt
from PySide6.QtGui import QColor, QIcon, QPainter, QPalette
from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QCheckBox,
    QComboBox,
    QDialog,
    QDoubleSpinBox,
    QFileDialog,
    QFormLayout,
    QGraphicsOpacityEffect,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from . import __version__
from .catalog_parser import IngestResult, MalformedFile, PartRecord, ingest_catalog
from .i18n import normalize_language, tr, tr_error
from .quotation import format_currency, parse_currency
from .search import SearchOptions
from .session import PartsSession
from .settings_store import AppSettings, save_settings

ACCENT_COLOR = "#D4A017"
RESULT_FIELDS = (
    ("item_no", "col_item_no"),
    ("item_description", "col_description"),
    ("item_group", "col_group"),
    ("model", "col_model"),
    ("bhl_hln_flag", "col_flag"),
    ("hsn_tax", "col_hsn"),
    ("sale_rate", "col_sale_rate"),
    ("mrp", "col_mrp"),
)


def resolve_app_icon_path() -> Path | None:
    candidates = [
        Path(sys.executable).resolve().parent / "Icon.ico",
        Path(__file__).resolve().parents[1] / "Icon.ico",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def get_app_icon() -> QIcon | None:
    icon_path = resolve_app_icon_path()
    if icon_path is None:
        return None
    icon = QIcon(str(icon_path))
    if icon.isNull():
        return None
    return icon


class ScrimWidget(QWidget):
    def __init__(self, on_dismiss, parent: QWidget) -> None:
        super().__init__(parent)
        self.on_dismiss = on_dismiss
        self.fade = QGraphicsOpacityEffect(self)
        self.fade.setOpacity(0.0)
        self.setGraphicsEffect(self.fade)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        event.accept()
        self.on_dismiss()

    def paintEvent(self, _event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(0, 0, 0, 115))
        painter.end()


class SlideOverPanel:
    """A fixed-width panel that slides in over the right edge of ``host``.

    A dimming scrim covers the rest of the host while the panel is open;
    clicking it calls ``on_dismiss``.
    """

    def __init__(self, host: QWidget, width: int, on_dismiss) -> None:
        self.host = host
        self.width = width
        self.is_open = False
        self.scrim = ScrimWidget(on_dismiss, host)
        self.scrim.hide()
        self.panel = QWidget(host)
        self._motion: QParallelAnimationGroup | None = None

    def panel_x(self, is_open: bool) -> int:
        return self.host.width() - self.width if is_open else self.host.width()

    def sync(self) -> None:
        self.scrim.setGeometry(self.host.rect())
        self.panel.setGeometry(self.panel_x(self.is_open), 0, self.width, self.host.height())

    def set_open(self, is_open: bool) -> None:
        if is_open == self.is_open:
            return
        self.is_open = is_open
        if self._motion is not None:
            self._motion.stop()
        self.panel.resize(self.width, self.host.height())
        if is_open:
            self.scrim.setGeometry(self.host.rect())
            self.scrim.show()
            self.scrim.raise_()
        self.panel.raise_()

        slide = QPropertyAnimation(self.panel, b"pos")
        slide.setDuration(240)
        slide.setEasingCurve(QEasingCurve.Type.OutCubic)
        slide.setEndValue(QPoint(self.panel_x(is_open), 0))
        fade = QPropertyAnimation(self.scrim.fade, b"opacity")
        fade.setDuration(200)
        fade.setEndValue(1.0 if is_open else 0.0)

        motion = QParallelAnimationGroup(self.host)
        motion.addAnimation(slide)
        motion.addAnimation(fade)
        if not is_open:
            motion.finished.connect(self._finish_close)
        motion.start()
        self._motion = motion

    def _finish_close(self) -> None:
        if not self.is_open:
            self.scrim.hide()


class SettingsDialog(QDialog):
    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.language = normalize_language(settings.language)
        self.setWindowTitle(tr(self.language, "settings_title"))
        icon = get_app_icon()
        if icon is not None:
            self.setWindowIcon(icon)
        self.resize(460, 220)
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.dark_mode_check = QCheckBox()
        self.dark_mode_check.setChecked(settings.theme_mode == "dark")
        form.addRow(tr(self.language, "settings_dark_mode"), self.dark_mode_check)

        self.language_combo = QComboBox()
        self.language_combo.addItem(tr(self.language, "lang_name_en"), "en")
        self.language_combo.addItem(tr(self.language, "lang_name_nl"), "nl")
        self.language_combo.setCurrentIndex(1 if self.language == "nl" else 0)
        form.addRow(tr(self.language, "settings_language"), self.language_combo)

        self.threshold_spin = QDoubleSpinBox()
        self.threshold_spin.setRange(0.0, 1.0)
        self.threshold_spin.setSingleStep(0.05)
        self.threshold_spin.setDecimals(2)
        self.threshold_spin.setValue(settings.search_threshold)
        self.threshold_spin.setToolTip(tr(self.language, "settings_help_threshold"))
        form.addRow(tr(self.language, "settings_threshold"), self.threshold_spin)

        self.min_length_spin = QSpinBox()
        self.min_length_spin.setRange(1, 10)
        self.min_length_spin.setValue(settings.min_match_length)
        form.addRow(tr(self.language, "settings_min_length"), self.min_length_spin)
        layout.addLayout(form)

        actions = QHBoxLayout()
        save_button = QPushButton(tr(self.language, "settings_save"))
        cancel_button = QPushButton(tr(self.language, "settings_cancel"))
        save_button.clicked.connect(self.accept)
        cancel_button.clicked.connect(self.reject)
        actions.addStretch(1)
        actions.addWidget(save_button)
        actions.addWidget(cancel_button)
        layout.addLayout(actions)

    def selected_settings(self, current: AppSettings) -> AppSettings:
        return AppSettings(
            theme_mode="dark" if self.dark_mode_check.isChecked() else "light",
            language=normalize_language(str(self.language_combo.currentData())),
            last_upload_dir=current.last_upload_dir,
            search_threshold=float(self.threshold_spin.value()),
            min_match_length=int(self.min_length_spin.value()),
        )


class MainWindow(QMainWindow):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self.settings = settings
        self.language = normalize_language(settings.language)
        self.session = PartsSession(
            SearchOptions(threshold=settings.search_threshold, min_match_length=settings.min_match_length)
        )
        self.current_results: list[PartRecord] | None = None
        icon = get_app_icon()
        if icon is not None:
            self.setWindowIcon(icon)
        self.resize(1250, 740)

        root = QWidget()
        self.setCentralWidget(root)
        root_layout = QVBoxLayout(root)

        top_actions = QHBoxLayout()
        self.heading_label = QLabel()
        self.heading_label.setStyleSheet(f"font-size: 22px; font-weight: bold; color: {ACCENT_COLOR};")
        self.upload_button = QPushButton()
        self.quotation_button = QPushButton()
        self.settings_button = QPushButton()
        top_actions.addWidget(self.heading_label)
        top_actions.addStretch(1)
        top_actions.addWidget(self.upload_button)
        top_actions.addWidget(self.quotation_button)
        top_actions.addWidget(self.settings_button)
        root_layout.addLayout(top_actions)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        root_layout.addWidget(self.status_label)

        self.welcome_label = QLabel()
        self.welcome_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root_layout.addWidget(self.welcome_label)

        search_row = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_button = QPushButton()
        self.clear_search_button = QPushButton()
        search_row.addWidget(self.search_input, 1)
        search_row.addWidget(self.search_button)
        search_row.addWidget(self.clear_search_button)
        root_layout.addLayout(search_row)

        self.results_label = QLabel("")
        root_layout.addWidget(self.results_label)
        self.results_table = QTableWidget(0, len(RESULT_FIELDS) + 1)
        self.results_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        self.results_table.horizontalHeader().setStretchLastSection(True)
        self.results_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.results_table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.results_table.setColumnWidth(1, 320)
        root_layout.addWidget(self.results_table, 1)

        self.quote_panel = SlideOverPanel(root, 460, self.close_quote_drawer)
        self.quote_drawer = self.quote_panel.panel
        self.quote_drawer.setObjectName("quoteDrawer")
        self.quote_drawer.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.quote_drawer.setStyleSheet(
            f"#quoteDrawer {{ border-left: 2px solid {ACCENT_COLOR}; background: palette(base); }}"
        )
        drawer_layout = QVBoxLayout(self.quote_drawer)
        drawer_layout.setContentsMargins(10, 10, 10, 10)
        drawer_head = QHBoxLayout()
        self.quote_title_label = QLabel()
        self.quote_title_label.setStyleSheet(f"font-size: 18px; font-weight: bold; color: {ACCENT_COLOR};")
        self.close_quote_button = QPushButton()
        drawer_head.addWidget(self.quote_title_label)
        drawer_head.addStretch(1)
        drawer_head.addWidget(self.close_quote_button)
        drawer_layout.addLayout(drawer_head)
        self.quote_empty_label = QLabel()
        self.quote_empty_label.setWordWrap(True)
        self.quote_empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        drawer_layout.addWidget(self.quote_empty_label)
        self.quote_table = QTableWidget(0, 5)
        self.quote_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        self.quote_table.horizontalHeader().setStretchLastSection(True)
        self.quote_table.setColumnWidth(0, 170)
        self.quote_table.setColumnWidth(4, 44)
        self.quote_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        drawer_layout.addWidget(self.quote_table, 1)

        totals_form = QFormLayout()
        self.discount_spin = QDoubleSpinBox()
        self.discount_spin.setRange(0.0, 100.0)
        self.discount_spin.setDecimals(2)
        self.discount_spin.setSuffix(" %")
        self.subtotal_value = QLabel("")
        self.discount_value = QLabel("")
        self.total_value = QLabel("")
        self.total_value.setStyleSheet(f"font-weight: bold; color: {ACCENT_COLOR};")
        self.discount_caption = QLabel()
        self.subtotal_caption = QLabel()
        self.discount_amount_caption = QLabel()
        self.total_caption = QLabel()
        totals_form.addRow(self.discount_caption, self.discount_spin)
        totals_form.addRow(self.subtotal_caption, self.subtotal_value)
        totals_form.addRow(self.discount_amount_caption, self.discount_value)
        totals_form.addRow(self.total_caption, self.total_value)
        drawer_layout.addLayout(totals_form)
        self.clear_quote_button = QPushButton()
        drawer_layout.addWidget(self.clear_quote_button)

        self.upload_button.clicked.connect(self.upload_file)
        self.quotation_button.clicked.connect(self.toggle_quote_drawer)
        self.settings_button.clicked.connect(self.open_settings)
        self.search_button.clicked.connect(self.run_search)
        self.search_input.returnPressed.connect(self.run_search)
        self.clear_search_button.clicked.connect(self.clear_search)
        self.close_quote_button.clicked.connect(self.close_quote_drawer)
        self.clear_quote_button.clicked.connect(self.clear_quotation)
        self.discount_spin.valueChanged.connect(self.on_discount_changed)

        self.apply_translations()
        self.refresh_catalog_state()
        self.refresh_quotation()
        self.quote_panel.sync()

    def apply_translations(self) -> None:
        self.setWindowTitle(tr(self.language, "window_title", version=__version__))
        self.heading_label.setText(tr(self.language, "app_heading"))
        self.upload_button.setText(tr(self.language, "btn_upload"))
        self.settings_button.setText(tr(self.language, "btn_settings"))
        self.welcome_label.setText(tr(self.language, "welcome_msg"))
        self.search_input.setPlaceholderText(tr(self.language, "search_placeholder"))
        self.search_button.setText(tr(self.language, "btn_search"))
        self.clear_search_button.setText(tr(self.language, "btn_clear"))
        self.results_table.setHorizontalHeaderLabels([tr(self.language, key) for _field, key in RESULT_FIELDS] + [""])
        self.quote_title_label.setText(tr(self.language, "quote_title"))
        self.close_quote_button.setText(tr(self.language, "btn_close"))
        self.quote_empty_label.setText(tr(self.language, "quote_empty"))
        self.quote_table.setHorizontalHeaderLabels(
            [
                tr(self.language, "quote_col_part"),
                tr(self.language, "quote_col_mrp"),
                tr(self.language, "quote_col_qty"),
                tr(self.language, "quote_col_total"),
                "",
            ]
        )
        self.discount_caption.setText(tr(self.language, "quote_discount"))
        self.subtotal_caption.setText(tr(self.language, "quote_subtotal"))
        self.discount_amount_caption.setText(tr(self.language, "quote_discount_amount"))
        self.total_caption.setText(tr(self.language, "quote_total"))
        self.clear_quote_button.setText(tr(self.language, "btn_clear"))
        self.update_quotation_button()
        self.render_results()

    def refresh_catalog_state(self) -> None:
        has_data = self.session.has_catalog
        self.welcome_label.setVisible(not has_data)
        self.search_input.setEnabled(has_data)
        self.search_button.setEnabled(has_data)
        self.clear_search_button.setEnabled(has_data)
        self.quotation_button.setVisible(has_data)
        self.upload_button.setEnabled(not self.session.is_loading)

    def upload_file(self) -> None:
        if self.session.is_loading:
            return
        path, _selected_filter = QFileDialog.getOpenFileName(
            self,
            tr(self.language, "upload_dialog_title"),
            self.settings.last_upload_dir,
            tr(self.language, "upload_file_filter"),
        )
        if not path:
            return
        file_path = Path(path)
        self.settings.last_upload_dir = str(file_path.parent)
        save_settings(self.settings)

        self.search_input.clear()
        self.current_results = None
        self.session.begin_load(file_path.name)
        self.close_quote_drawer()
        self.refresh_catalog_state()
        self.refresh_quotation()
        self.render_results()

        result, error = self.run_ingest_with_progress(file_path)
        if error is not None:
            self.session.apply_failure(error)
            self.set_status(tr(self.language, "upload_failed", error=tr_error(self.language, error)), ok=False)
        elif result is not None:
            self.session.apply_ingest(result)
            if result.duplicates_replaced:
                message = tr(
                    self.language,
                    "upload_success_duplicates",
                    count=len(result.records),
                    duplicates=result.duplicates_replaced,
                )
            else:
                message = tr(self.language, "upload_success", count=len(result.records))
            self.set_status(message, ok=True)
        self.refresh_catalog_state()
        self.refresh_quotation()
        self.render_results()

    def run_ingest_with_progress(self, file_path: Path) -> tuple[IngestResult | None, Exception | None]:
        progress_dialog = QDialog(self)
        progress_dialog.setWindowTitle(tr(self.language, "upload_progress_title"))
        progress_dialog.setModal(True)
        progress_dialog.setWindowFlag(Qt.WindowType.WindowCloseButtonHint, False)
        progress_dialog.setWindowFlag(Qt.WindowType.WindowContextHelpButtonHint, False)
        progress_dialog.setFixedSize(420, 110)
        layout = QVBoxLayout(progress_dialog)
        layout.addWidget(QLabel(tr(self.language, "upload_progress_msg")))
        bar = QProgressBar()
        bar.setRange(0, 0)
        layout.addWidget(bar)

        outcome: dict[str, object] = {"result": None, "error": None, "done": False}
        max_records = self.session.max_records

        def _ingest_in_background() -> None:
            try:
                try:
                    data = file_path.read_bytes()
                except OSError as exc:
                    raise MalformedFile("Could not read the file.") from exc
                outcome["result"] = ingest_catalog(file_path.name, data, max_records=max_records)
            except Exception as exc:
                outcome["error"] = exc
            finally:
                outcome["done"] = True

        worker = threading.Thread(target=_ingest_in_background, daemon=True)
        worker.start()

        poll_timer = QTimer(progress_dialog)

        def _poll() -> None:
            if not bool(outcome.get("done")):
                return
            poll_timer.stop()
            progress_dialog.accept()

        poll_timer.setInterval(100)
        poll_timer.timeout.connect(_poll)
        poll_timer.start()
        progress_dialog.exec()
        worker.join()

        error = outcome["error"]
        if isinstance(error, Exception):
            return None, error
        result = outcome["result"]
        return (result if isinstance(result, IngestResult) else None), None

    def set_status(self, message: str, ok: bool) -> None:
        color = "#4ADE80" if ok else "#F87171"
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(message)

    def run_search(self) -> None:
        self.current_results = self.session.search(self.search_input.text())
        self.render_results()

    def clear_search(self) -> None:
        self.search_input.clear()
        self.current_results = None
        self.render_results()

    def render_results(self) -> None:
        results = self.current_results
        if results is None:
            self.results_label.setText("")
            self.results_table.setRowCount(0)
            self.results_table.setVisible(False)
            return
        self.results_table.setVisible(bool(results))
        if not results:
            self.results_label.setText(tr(self.language, "results_none"))
            self.results_table.setRowCount(0)
            return
        self.results_label.setText(tr(self.language, "results_heading", count=len(results)))
        self.results_table.setRowCount(len(results))
        add_col = len(RESULT_FIELDS)
        for row_idx, part in enumerate(results):
            for col_idx, (field_name, _key) in enumerate(RESULT_FIELDS):
                self.results_table.setItem(row_idx, col_idx, QTableWidgetItem(getattr(part, field_name)))
            in_quote = self.session.quotation.contains(part.item_no)
            add_button = QPushButton(tr(self.language, "btn_added" if in_quote else "btn_add"))
            add_button.setEnabled(not in_quote)
            add_button.clicked.connect(lambda _checked=False, p=part: self.add_to_quotation(p))
            self.results_table.setCellWidget(row_idx, add_col, add_button)

    def add_to_quotation(self, part: PartRecord) -> None:
        self.session.quotation.add(part)
        self.refresh_quotation()
        self.render_results()

    def remove_from_quotation(self, item_no: str) -> None:
        self.session.quotation.remove(item_no)
        self.refresh_quotation()
        self.render_results()

    def on_quantity_changed(self, item_no: str, quantity: int) -> None:
        ledger = self.session.quotation
        ledger.set_quantity(item_no, quantity)
        line = ledger.get(item_no)
        if line is None:
            # the spin box that fired is still live, rebuild once its signal returns
            QTimer.singleShot(0, self.refresh_quotation)
            QTimer.singleShot(0, self.render_results)
            return
        for row_idx in range(self.quote_table.rowCount()):
            item = self.quote_table.item(row_idx, 0)
            if item is not None and item.data(Qt.ItemDataRole.UserRole) == item_no:
                self.quote_table.setItem(row_idx, 3, QTableWidgetItem(format_currency(ledger.line_total(line))))
                break
        self.refresh_totals()

    def on_discount_changed(self, value: float) -> None:
        self.session.quotation.set_discount(value)
        self.refresh_totals()

    def clear_quotation(self) -> None:
        if not len(self.session.quotation):
            return
        answer = QMessageBox.question(
            self,
            tr(self.language, "quote_clear_title"),
            tr(self.language, "quote_clear_msg"),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.session.quotation.clear()
        self.refresh_quotation()
        self.render_results()

    def update_quotation_button(self) -> None:
        count = len(self.session.quotation)
        if count:
            self.quotation_button.setText(tr(self.language, "btn_quotation_count", count=count))
        else:
            self.quotation_button.setText(tr(self.language, "btn_quotation"))

    def refresh_quotation(self) -> None:
        ledger = self.session.quotation
        lines = ledger.lines()
        self.quote_empty_label.setVisible(not lines)
        self.quote_table.setVisible(bool(lines))
        self.quote_table.setRowCount(len(lines))
        for row_idx, line in enumerate(lines):
            part_item = QTableWidgetItem(f"{line.part.item_description}\n{line.part.item_no}")
            part_item.setData(Qt.ItemDataRole.UserRole, line.item_no)
            self.quote_table.setItem(row_idx, 0, part_item)
            self.quote_table.setItem(row_idx, 1, QTableWidgetItem(format_currency(parse_currency(line.part.mrp))))
            qty_spin = QSpinBox()
            qty_spin.setRange(0, 99999)
            qty_spin.setValue(line.quantity)
            qty_spin.valueChanged.connect(lambda value, k=line.item_no: self.on_quantity_changed(k, value))
            self.quote_table.setCellWidget(row_idx, 2, qty_spin)
            self.quote_table.setItem(row_idx, 3, QTableWidgetItem(format_currency(ledger.line_total(line))))
            delete_button = QPushButton("🗑")
            delete_button.clicked.connect(lambda _checked=False, k=line.item_no: self.remove_from_quotation(k))
            self.quote_table.setCellWidget(row_idx, 4, delete_button)
        self.quote_table.resizeRowsToContents()
        self.discount_spin.blockSignals(True)
        self.discount_spin.setValue(ledger.discount_pct)
        self.discount_spin.blockSignals(False)
        self.clear_quote_button.setEnabled(bool(lines))
        self.refresh_totals()
        self.update_quotation_button()

    def refresh_totals(self) -> None:
        totals = self.session.quotation.totals()
        self.subtotal_value.setText(format_currency(totals.subtotal))
        self.discount_value.setText(f"-{format_currency(totals.discount_amount)}")
        self.total_value.setText(format_currency(totals.total))

    def open_settings(self) -> None:
        dialog = SettingsDialog(self.settings, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        updated = dialog.selected_settings(self.settings)
        save_settings(updated)
        self.settings = updated
        self.language = updated.language
        apply_app_theme(updated.theme_mode)
        self.session.set_search_options(
            SearchOptions(threshold=updated.search_threshold, min_match_length=updated.min_match_length)
        )
        self.apply_translations()

    def toggle_quote_drawer(self) -> None:
        self.refresh_quotation()
        self.quote_panel.set_open(not self.quote_panel.is_open)

    def close_quote_drawer(self) -> None:
        self.quote_panel.set_open(False)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        panel = getattr(self, "quote_panel", None)
        if panel is not None:
            panel.sync()


def apply_app_theme(theme_mode: str) -> None:
    app = QApplication.instance()
    if app is None:
        return
    app.setStyle("Fusion")
    dark = theme_mode == "dark"
    colors = {
        QPalette.ColorRole.Window: "#1A1A1A" if dark else "#FFFDF5",
        QPalette.ColorRole.WindowText: "#F5F5F5" if dark else "#111111",
        QPalette.ColorRole.Base: "#242424" if dark else "#FFFFFF",
        QPalette.ColorRole.AlternateBase: "#1A1A1A" if dark else "#FAF6E8",
        QPalette.ColorRole.ToolTipBase: "#242424" if dark else "#FFFFFF",
        QPalette.ColorRole.ToolTipText: "#F5F5F5" if dark else "#111111",
        QPalette.ColorRole.Text: "#F5F5F5" if dark else "#111111",
        QPalette.ColorRole.Button: "#2B2B2B" if dark else "#F5EFD9",
        QPalette.ColorRole.ButtonText: "#F5F5F5" if dark else "#111111",
        QPalette.ColorRole.Highlight: ACCENT_COLOR,
        QPalette.ColorRole.HighlightedText: "#111111",
    }
    palette = QPalette()
    for role, color in colors.items():
        palette.setColor(role, QColor(color))
    app.setPalette(palette)
    border = "#4A3F1A" if dark else "#E0D3A8"
    app.setStyleSheet(
        f"""
        QLineEdit, QTableWidget, QSpinBox, QDoubleSpinBox, QComboBox {{
            border: 1px solid {border};
            padding: 3px;
        }}
        QLineEdit:focus {{ border: 1px solid {ACCENT_COLOR}; }}
        QPushButton {{
            border: 1px solid {ACCENT_COLOR};
            padding: 4px 12px;
        }}
        QPushButton:hover {{ background: {ACCENT_COLOR}; color: #111111; }}
        QPushButton:disabled {{ border: 1px solid {border}; }}
        QHeaderView::section {{
            border: 1px solid {border};
            padding: 4px;
        }}
        """
    )


def run_ui(settings: AppSettings) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    icon = get_app_icon()
    if icon is not None:
        app.setWindowIcon(icon)
    apply_app_theme(settings.theme_mode)
    win = MainWindow(settings)
    win.show()
    return app.exec()
