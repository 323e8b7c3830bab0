"""Receipts: record retail sales with live subtotal, tax, service charge and gratuity."""

__version__ = "0.1.0"
