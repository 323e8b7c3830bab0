from PySide6.QtCore import QLocale, Qt, Signal
from PySide6.QtGui import QDoubleValidator, QFont
from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QLineEdit

from ...utils.helpers import fmt_money, fmt_percent
from ...utils.ui_helpers import sync_text
from .sale import Sale


def amount_validator(top: float, parent=None) -> QDoubleValidator:
    """Non-negative, two decimals, dot as separator regardless of locale."""
    v = QDoubleValidator(0.0, top, 2, parent)
    v.setNotation(QDoubleValidator.StandardNotation)
    v.setLocale(QLocale.c())
    return v


class TotalsPanel(QGroupBox):
    """
    Subtotal / service charge / tax / gratuity / total strip.

    Read-only panels show the service charge percent and gratuity as text.
    Editable panels show inputs instead and emit the raw text as typed;
    pressing Enter in either input emits `submitted`.
    """

    serviceChargeEdited = Signal(str)
    gratuityEdited = Signal(str)
    submitted = Signal()

    def __init__(self, editable: bool = False, parent=None):
        super().__init__("Totals", parent)
        self.editable = editable
        grid = QGridLayout(self)
        grid.setColumnMinimumWidth(0, 150)
        grid.setColumnStretch(2, 1)

        self.lab_subtotal = QLabel("-")
        self.lab_service = QLabel("-")
        self.lab_tax = QLabel("-")
        self.lab_gratuity = QLabel("-")
        self.lab_total = QLabel("-")

        if editable:
            self.edt_service = QLineEdit()
            self.edt_service.setObjectName("service-charge")
            self.edt_service.setPlaceholderText("0.0")
            self.edt_service.setMaximumWidth(60)
            self.edt_service.setValidator(amount_validator(1000.0, self.edt_service))
            self.edt_gratuity = QLineEdit()
            self.edt_gratuity.setObjectName("gratuity")
            self.edt_gratuity.setPlaceholderText("0.00")
            self.edt_gratuity.setMaximumWidth(100)
            self.edt_gratuity.setValidator(amount_validator(1e9, self.edt_gratuity))

            self.edt_service.textEdited.connect(self.serviceChargeEdited)
            self.edt_gratuity.textEdited.connect(self.gratuityEdited)
            self.edt_service.returnPressed.connect(self.submitted)
            self.edt_gratuity.returnPressed.connect(self.submitted)
            service_input, gratuity_input = self.edt_service, self.edt_gratuity
        else:
            self.lab_service_pct = QLabel("-")
            self.lab_gratuity_amt = QLabel("-")
            service_input, gratuity_input = self.lab_service_pct, self.lab_gratuity_amt

        font = QFont()
        font.setPointSize(12)
        font.setBold(True)
        cap_total = QLabel("Total")
        cap_total.setFont(font)
        self.lab_total.setFont(font)

        rows = (
            (QLabel("Subtotal"), None, self.lab_subtotal),
            (QLabel("Service Charge"), service_input, self.lab_service),
            (QLabel("Tax"), None, self.lab_tax),
            (QLabel("Gratuity"), gratuity_input, self.lab_gratuity),
            (cap_total, None, self.lab_total),
        )
        for r, (cap, extra, amount) in enumerate(rows):
            grid.addWidget(cap, r, 0)
            if extra is not None:
                grid.addWidget(extra, r, 1)
            amount.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            grid.addWidget(amount, r, 3)

    def render(self, sale: Sale) -> None:
        self.lab_subtotal.setText(fmt_money(sale.calculate_subtotal()))
        self.lab_service.setText(fmt_money(sale.calculate_service_charge()))
        self.lab_tax.setText(fmt_money(sale.calculate_tax()))
        self.lab_gratuity.setText(fmt_money(sale.gratuity_value()))
        self.lab_total.setText(fmt_money(sale.calculate_total()))

        if self.editable:
            pct = sale.service_charge_percent
            sync_text(self.edt_service, "" if pct is None else f"{pct:.1f}")
            grat = sale.gratuity_amount
            sync_text(self.edt_gratuity, "" if grat is None else f"{grat:.2f}")
        else:
            self.lab_service_pct.setText(fmt_percent(sale.service_charge_percent))
            self.lab_gratuity_amt.setText(fmt_money(sale.gratuity_value()))
