# receipts/constants.py
APP_NAME = "Receipts"
TITLE_SEPARATOR = " • "

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

DEFAULT_SALE_NAME = "New Sale"
UNTITLED_SALE_NAME = "Untitled sale"
FIRST_SALE_ID = 1

CURRENCY_SYMBOL = "$"

STYLE_FILE = "resources/style.qss"
RECEIPT_TEMPLATE = "templates/receipt.html"

LOG_LEVEL_ENV = "RECEIPTS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
