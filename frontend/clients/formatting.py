# frontend/clients/formatting.py
CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$"}


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, "$")


def format_currency(cents: int, currency: str) -> str:
    """Minor units to display string, e.g. 35000 INR -> '₹350.00'."""
    return f"{currency_symbol(currency)}{cents / 100:,.2f}"
