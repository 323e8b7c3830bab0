# receipts/modules/sales/__init__.py

"""
Sale screen package exports.

Domain types and update logic:
- Sale, SaleItem
- Mode, Operation
- update, handle_hotkey

Qt views are imported from their modules directly:
- SaleController (controller), ShowView (show), EditView (edit)
"""

from .messages import Mode, Operation
from .sale import Sale, SaleItem
from .actions import update, handle_hotkey

__all__ = [
    "Sale",
    "SaleItem",
    "Mode",
    "Operation",
    "update",
    "handle_hotkey",
]
