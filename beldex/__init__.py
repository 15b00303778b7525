"""Beldex amounts: denominations, parsing, formatting, checked arithmetic and plain-value conversion."""

__version__ = "0.21.0"
__all__ = ["amount", "amount_serde", "denomination", "signed_amount"]