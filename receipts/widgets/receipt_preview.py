import logging
from pathlib import Path

from jinja2 import Template, TemplateError
from PySide6.QtGui import QKeySequence, QShortcut, QTextDocument
from PySide6.QtPrintSupport import QPrintDialog, QPrinter
from PySide6.QtWidgets import QDialog, QTextBrowser, QToolBar, QVBoxLayout

from ..config import RECEIPT_TEMPLATE_PATH
from ..constants import UNTITLED_SALE_NAME
from ..utils.helpers import fmt_money, fmt_percent
from ..utils.ui_helpers import error

_log = logging.getLogger(__name__)


def render_receipt_html(sale, sale_id=None, template_path: Path = RECEIPT_TEMPLATE_PATH) -> str:
    """Render the printable receipt for `sale` as HTML."""
    template = Template(template_path.read_text(encoding="utf-8"), autoescape=True)
    return template.render(
        sale=sale,
        sale_id=sale_id,
        untitled=UNTITLED_SALE_NAME,
        money=fmt_money,
        percent=fmt_percent,
    )


class ReceiptPreview(QDialog):
    def __init__(self, sale, sale_id=None, parent=None):
        super().__init__(parent)
        self.sale = sale
        self.sale_id = sale_id
        self.setWindowTitle("Receipt" if sale_id is None else f"Receipt #{sale_id}")
        self.resize(520, 640)
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        toolbar = QToolBar()
        layout.addWidget(toolbar)

        refresh_action = toolbar.addAction("Refresh")
        refresh_action.triggered.connect(self.refresh_preview)
        print_action = toolbar.addAction("Print")
        print_action.triggered.connect(self.print_receipt)

        print_shortcut = QShortcut(QKeySequence("Ctrl+P"), self)
        print_shortcut.activated.connect(self.print_receipt)

        self.web_view = QTextBrowser()
        self.web_view.setOpenExternalLinks(False)
        layout.addWidget(self.web_view)

        self.load_receipt()

    def load_receipt(self):
        try:
            html = render_receipt_html(self.sale, self.sale_id)
        except (OSError, TemplateError) as e:
            _log.exception("Could not render receipt")
            html = f"""
            <html>
                <body>
                    <h2>Error Loading Receipt</h2>
                    <p>Could not load the receipt template: {e}</p>
                </body>
            </html>
            """
        self.web_view.setHtml(html)

    def refresh_preview(self):
        self.load_receipt()

    def print_receipt(self):
        """Print the receipt using the system print dialog."""
        printer = QPrinter(QPrinter.HighResolution)
        printer.setDocName("Receipt" if self.sale_id is None else f"Receipt_{self.sale_id}")
        dialog = QPrintDialog(printer, self)
        if dialog.exec() != QDialog.Accepted:
            return
        try:
            doc = QTextDocument()
            doc.setHtml(self.web_view.toHtml())
            doc.print_(printer)
        except RuntimeError as e:
            _log.exception("Printing failed")
            error(self, "Print Error", f"Could not print receipt: {e}")
