from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ..config import AppPalette
from .presenter import QUICK_WORK_TYPES, WEEKDAY_LABELS, SchedulePresenter
from .styles.theme import style_cell


class CalendarWindow(QMainWindow):
    # Presenter callbacks may fire on the HTTP server thread; re-render on the GUI thread.
    state_changed = pyqtSignal()

    def __init__(self, *, presenter: SchedulePresenter, palette: AppPalette, app_name: str) -> None:
        super().__init__()
        self.presenter = presenter
        self.app_palette = palette
        self.setWindowTitle(app_name)
        self.resize(1100, 760)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.title_label = QLabel("")
        self.title_label.setObjectName("calendarTitle")
        layout.addWidget(self.title_label)

        self.table = QTableWidget(6, 7)
        self.table.setHorizontalHeaderLabels(list(WEEKDAY_LABELS))
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.cellClicked.connect(self._on_cell_clicked)
        layout.addWidget(self.table, stretch=1)

        # Quick actions only make sense against a rendered month.
        self.quick_actions = QWidget()
        quick_layout = QVBoxLayout(self.quick_actions)
        quick_layout.setContentsMargins(0, 0, 0, 0)

        self.selected_label = QLabel("")
        self.selected_label.setObjectName("selectedDate")
        quick_layout.addWidget(self.selected_label)

        chips = QHBoxLayout()
        for label in QUICK_WORK_TYPES:
            button = QPushButton(label)
            button.setObjectName("chip")
            button.clicked.connect(lambda _checked=False, value=label: self.presenter.choose_preset(value))
            chips.addWidget(button)
        chips.addStretch(1)
        quick_layout.addLayout(chips)

        self.work_type_input = QLineEdit()
        self.work_type_input.setPlaceholderText("Work type")
        self.work_type_input.textEdited.connect(self._on_work_type_edited)
        quick_layout.addWidget(self.work_type_input)

        self.content_input = QTextEdit()
        self.content_input.setPlaceholderText("Content")
        self.content_input.setFixedHeight(80)
        self.content_input.textChanged.connect(self._on_content_changed)
        quick_layout.addWidget(self.content_input)

        buttons = QHBoxLayout()
        apply_button = QPushButton("Apply")
        apply_button.clicked.connect(self._on_apply)
        buttons.addStretch(1)
        buttons.addWidget(apply_button)
        quick_layout.addLayout(buttons)
        layout.addWidget(self.quick_actions)

        download_row = QHBoxLayout()
        download_button = QPushButton("Download")
        download_button.clicked.connect(self._on_download)
        download_row.addStretch(1)
        download_row.addWidget(download_button)
        layout.addLayout(download_row)

        self.setCentralWidget(root)

        self.state_changed.connect(self.render)
        self.presenter.subscribe(self.state_changed.emit)
        self.render()

    def render(self) -> None:
        presenter = self.presenter
        self.title_label.setText(presenter.heading)
        self.selected_label.setText(f"Selected: {presenter.effective_date()}")
        if self.work_type_input.text() != presenter.quick_work_type:
            self.work_type_input.setText(presenter.quick_work_type)
        if self.content_input.toPlainText() != presenter.quick_content:
            self.content_input.blockSignals(True)
            self.content_input.setPlainText(presenter.quick_content)
            self.content_input.blockSignals(False)

        self.table.clearContents()
        self.table.setVisible(presenter.has_calendar)
        self.quick_actions.setVisible(presenter.has_calendar)
        for row, week in enumerate(presenter.calendar_weeks):
            for column, cell in enumerate(week):
                item = QTableWidgetItem("\n".join(presenter.cell_lines(cell)))
                item.setData(Qt.ItemDataRole.UserRole, cell.date)
                item.setTextAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
                style_cell(item, cell, self.app_palette, selected=cell.date == presenter.selected_date)
                self.table.setItem(row, column, item)
        self.table.resizeRowsToContents()

    def _on_cell_clicked(self, row: int, column: int) -> None:
        item = self.table.item(row, column)
        if item is not None:
            self.presenter.select_cell(item.data(Qt.ItemDataRole.UserRole))

    def _on_work_type_edited(self, text: str) -> None:
        self.presenter.quick_work_type = text

    def _on_content_changed(self) -> None:
        self.presenter.quick_content = self.content_input.toPlainText()

    def _on_apply(self) -> None:
        output = self.presenter.apply()
        if not output.get("success"):
            QMessageBox.critical(self, "Error", str(output.get("error")))

    def _on_download(self) -> None:
        try:
            path = self.presenter.download()
        except Exception as exc:  # noqa: BLE001
            QMessageBox.critical(self, "Error", str(exc))
            return
        self.statusBar().showMessage(f"Saved {path}", 4000)
