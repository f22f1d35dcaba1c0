# asset_tracker/currency.py
from decimal import Decimal

from .models import Office

# Fixed rates, USD -> office currency
RATES = {
    Office.NEW_YORK: Decimal("1.0"),
    Office.LONDON: Decimal("0.8"),
    Office.TOKYO: Decimal("152.0"),
}

SYMBOLS = {
    Office.NEW_YORK: "$",
    Office.LONDON: "£",
    Office.TOKYO: "¥",
}


def convert_price(price_usd: Decimal, office: Office) -> Decimal:
    return Decimal(price_usd) * RATES[office]


def currency_symbol(office: Office) -> str:
    return SYMBOLS.get(office, "")


def format_price(amount: Decimal, office: Office) -> str:
    # Decimal.__format__ rounds without the context precision limit
    return f"{currency_symbol(office)}{Decimal(amount):.2f}"
