# /frota/ui/plate_field.py
from typing import Optional

from PyQt5 import QtCore, QtWidgets

from frota.validation import PlatePostProcessor, PlateValidationResult


class PlateLineEdit(QtWidgets.QLineEdit):
    """Campo de placa: aplica a máscara a cada tecla e valida ao sair do campo."""

    validation_changed = QtCore.pyqtSignal(bool, str)

    BASE_STYLE = """
        QLineEdit {
            padding: 6px 8px;
            border: 2px solid %s;
            border-radius: 4px;
            font-weight: 600;
            letter-spacing: 1px;
        }
    """
    NEUTRAL_COLOR = "#555"
    SUCCESS_COLOR = "#28a745"
    ERROR_COLOR = "#dc3545"

    def __init__(
        self,
        processor: Optional[PlatePostProcessor] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.processor = processor or PlatePostProcessor()
        self._accepted_value = ""
        self._result: Optional[PlateValidationResult] = None

        self.setPlaceholderText(self.processor.placeholder())
        self._show_neutral()

        self.textEdited.connect(self.handle_text_edited)
        self.editingFinished.connect(self.run_validation)

    def handle_text_edited(self, text: str) -> None:
        value = self.processor.format_input(self._accepted_value, text)
        self._accepted_value = value
        if value != text:
            self.setText(value)
        if self._result is not None:
            self._result = None
            self._show_neutral()

    def run_validation(self) -> PlateValidationResult:
        result = self.processor.validate(self.text())
        self._result = result
        if result.is_valid:
            self._paint_border(self.SUCCESS_COLOR)
            self.setToolTip(self.processor.format_hint())
        else:
            self._paint_border(self.ERROR_COLOR)
            self.setToolTip(result.error_message or "")
        self.validation_changed.emit(result.is_valid, result.error_message or "")
        return result

    def validation_result(self) -> Optional[PlateValidationResult]:
        return self._result

    def plate(self) -> str:
        return self.processor.normalize(self.text())

    def set_plate(self, plate: str) -> None:
        """Preenche o campo com uma placa já cadastrada (modo edição)."""
        value = self.processor.format_input("", plate)
        self._accepted_value = value
        self.setText(value)
        self._result = None
        self._show_neutral()

    def _show_neutral(self) -> None:
        self._paint_border(self.NEUTRAL_COLOR)
        self.setToolTip(self.processor.format_hint())

    def _paint_border(self, color: str) -> None:
        self.setStyleSheet(self.BASE_STYLE % color)
