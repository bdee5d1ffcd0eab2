"""Holdings file template generation."""

import csv
import io

from rebalance_advisor.core.exceptions import ValidationError
from rebalance_advisor.domain.models import Currency

TEMPLATE_COLUMNS = [
    "Activo",
    "Unidad Monetaria",
    "Cantidad",
    "Monto Moneda Origen",
    "Clase de Activo",
    "ISIN",
    "Nemo Local",
]

_EXAMPLES: dict[Currency, list[list[str]]] = {
    Currency.USD: [
        ["Apple Inc.", "USD", "1000", "150000", "Renta Variable", "US0378331005", "AAPL"],
        ["Vanguard Total Bond Market ETF", "USD", "800", "80000", "Renta Fija", "US9229087690", "BND"],
        ["Vanguard Real Estate ETF", "USD", "300", "30000", "Alternativo", "US9229086348", "VNQ"],
        ["Money Market Fund", "USD", "5000", "5000", "Money Market", "US1234567890", "MMF"],
        ["Balanced Fund", "USD", "2000", "20000", "Balanceado", "US0987654321", "BAL"],
    ],
    Currency.CLP: [
        ["Banco de Chile", "CLP", "1000", "15000000", "Renta Variable", "CL0000000001", "CHILE"],
        ["Bono del Tesoro de Chile 10 años", "CLP", "800", "8000000", "Renta Fija", "CL0000000002", "BTU"],
        ["Fondo Inmobiliario", "CLP", "300", "3000000", "Alternativo", "CL0000000003", "REITS"],
        ["Depósito a Plazo", "CLP", "1", "2000000", "Caja", "", "DAP"],
        ["Fondo Balanceado", "CLP", "500", "5000000", "Balanceado", "CL0000000004", "FBAL"],
    ],
}


class PortfolioTemplateGenerator:
    """Generator for holdings import templates with example rows."""

    def generate(self, currency: str = "USD") -> str:
        """
        Return a CSV template with headers and example rows.

        Args:
            currency: USD or CLP; selects the example holdings

        Returns:
            CSV text (header plus five example rows)
        """
        examples = _EXAMPLES[self._currency(currency)]
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(TEMPLATE_COLUMNS)
        writer.writerows(examples)
        return output.getvalue()

    def filename(self, currency: str = "USD") -> str:
        """Download name for the template, e.g. portfolio_template_usd.csv."""
        return f"portfolio_template_{self._currency(currency).value.lower()}.csv"

    @staticmethod
    def _currency(currency: str) -> Currency:
        try:
            return Currency(currency.upper())
        except ValueError:
            raise ValidationError(f"Unsupported currency: {currency}. Use USD or CLP.")
