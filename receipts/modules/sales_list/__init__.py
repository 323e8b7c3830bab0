# receipts/modules/sales_list/__init__.py
"""The list screen: every recorded sale, plus the way into a new one."""

from .messages import Message, NewSale, SelectSale

__all__ = ["Message", "NewSale", "SelectSale"]
