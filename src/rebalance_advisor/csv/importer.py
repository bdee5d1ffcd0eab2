"""
Holdings file import.

Parses custodian statements exported as CSV or Excel into portfolio assets.
Column names are sniffed from Spanish and English aliases; asset class labels
are normalized to the six fixed categories. Bad rows are reported one by one
and never fail the whole file.
"""

import csv
import io
import logging
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from rebalance_advisor.core.exceptions import UnsupportedFileError
from rebalance_advisor.domain.models import Asset, AssetCategory
from rebalance_advisor.domain.views import ParsedPortfolio

logger = logging.getLogger(__name__)


# Header aliases per field, in resolution order. Earlier fields claim their
# column first so later, looser aliases cannot steal it.
COLUMN_ALIASES: dict[str, list[str]] = {
    "name": ["activo", "asset", "nombre", "name", "descripcion", "description"],
    "amount": [
        "monto moneda origen",
        "monto moneda de origen",
        "current value",
        "valor actual",
        "amount",
    ],
    "category": ["clase de activo", "clase activo", "category", "tipo", "asset class"],
    "isin": ["isin", "codigo isin"],
    "nemo_local": ["nemo local", "nemotecnico", "ticker", "symbol", "codigo"],
    "quantity": ["cantidad", "shares", "quantity", "units", "unidades"],
    "currency": ["unidad monetaria", "currency", "moneda"],
}

CATEGORY_LABELS: dict[str, AssetCategory] = {
    # Spanish
    "alternativo": AssetCategory.ALTERNATIVE_INVESTMENTS,
    "alternativos": AssetCategory.ALTERNATIVE_INVESTMENTS,
    "balanceado": AssetCategory.BALANCEADO,
    "caja": AssetCategory.CAJA,
    "dif valorizacion": AssetCategory.OTHER,
    "diferencia valorizacion": AssetCategory.OTHER,
    "money market": AssetCategory.CAJA,
    "no especificado": AssetCategory.OTHER,
    "pasivos": AssetCategory.OTHER,
    "renta fija": AssetCategory.FIXED_INCOME,
    "renta variable": AssetCategory.EQUITIES,
    # English
    "alternative": AssetCategory.ALTERNATIVE_INVESTMENTS,
    "alternatives": AssetCategory.ALTERNATIVE_INVESTMENTS,
    "alternative investments": AssetCategory.ALTERNATIVE_INVESTMENTS,
    "balanced": AssetCategory.BALANCEADO,
    "cash": AssetCategory.CAJA,
    "unspecified": AssetCategory.OTHER,
    "liabilities": AssetCategory.OTHER,
    "other": AssetCategory.OTHER,
    "fixed income": AssetCategory.FIXED_INCOME,
    "bonds": AssetCategory.FIXED_INCOME,
    "equities": AssetCategory.EQUITIES,
    "equity": AssetCategory.EQUITIES,
    "stocks": AssetCategory.EQUITIES,
    "variable income": AssetCategory.EQUITIES,
}

CSV_EXTENSIONS = {".csv"}
EXCEL_EXTENSIONS = {".xlsx", ".xls"}

_SEPARATOR_RUN = re.compile(r"[_\s]+")
_AMOUNT_NOISE = re.compile(r"[$\s%()]")
_CURRENCY_CODE = re.compile(r"^[A-Za-z]+|[A-Za-z]+$")


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------


def normalize_label(value: str) -> str:
    """Lower-case, trim and collapse underscore/whitespace runs to one space."""
    return _SEPARATOR_RUN.sub(" ", value.strip().lower())


def find_column(
    headers: list[str],
    aliases: list[str],
    claimed: Optional[set[str]] = None,
) -> Optional[str]:
    """
    Return the header matching one of the aliases, or None.

    Exact matches win over containment matches (header contains the alias
    or the alias contains the header). Headers in claimed are skipped.
    """
    claimed = claimed or set()
    candidates = [
        (header, normalize_label(header))
        for header in headers
        if header not in claimed and normalize_label(header)
    ]
    normalized_aliases = [normalize_label(alias) for alias in aliases]

    for alias in normalized_aliases:
        for header, normalized in candidates:
            if normalized == alias:
                return header
    for alias in normalized_aliases:
        for header, normalized in candidates:
            if alias in normalized or normalized in alias:
                return header
    return None


def normalize_category(label: str) -> AssetCategory:
    """Map a free-text asset class label to a category; unknown labels are Other."""
    return CATEGORY_LABELS.get(normalize_label(label), AssetCategory.OTHER)


def normalize_currency(value: str) -> str:
    """Return USD or CLP for recognizable labels, else the trimmed input."""
    lowered = value.strip().lower()
    if any(token in lowered for token in ("usd", "dollar", "dolar", "dólar")):
        return "USD"
    if "clp" in lowered or "peso" in lowered:
        return "CLP"
    return value.strip()


def parse_amount(value: Any) -> Decimal:
    """
    Parse a monetary amount as an absolute Decimal.

    Numbers are taken as-is. Strings drop currency symbols and codes
    ($, USD, CLP), whitespace, percent signs and parentheses. When both
    '.' and ',' appear, the last one is the decimal mark. A lone separator
    repeated, or followed by exactly three digits, is a thousands separator
    (1.234.567 or 150,000; so 0.125 reads as 125). Anything unparseable
    reads as 0.
    """
    if value is None or _is_blank(value):
        return Decimal("0")
    if isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        try:
            return abs(Decimal(str(value)))
        except InvalidOperation:
            return Decimal("0")

    text = _CURRENCY_CODE.sub("", _AMOUNT_NOISE.sub("", str(value)))
    if not text:
        return Decimal("0")

    if "." in text and "," in text:
        decimal_mark = "." if text.rfind(".") > text.rfind(",") else ","
        thousands = "," if decimal_mark == "." else "."
        text = text.replace(thousands, "").replace(decimal_mark, ".")
    elif "," in text or "." in text:
        sep = "," if "," in text else "."
        head, _, tail = text.rpartition(sep)
        if text.count(sep) > 1 or len(tail) == 3:
            text = text.replace(sep, "")
        else:
            text = f"{head}.{tail}"

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return abs(amount)


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _text(value: Any) -> str:
    if value is None or _is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        # Excel hands back whole-number codes as floats
        return str(int(value))
    return str(value).strip()


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class PortfolioFileParser:
    """
    Parser for holdings statements (CSV or Excel).

    Expected columns (any alias): Activo, Monto Moneda Origen, and optionally
    Unidad Monetaria, Cantidad, Clase de Activo, ISIN, Nemo Local.
    Row numbers in messages are spreadsheet rows (header is row 1).
    """

    def __init__(self, max_rows: int = 10_000):
        self._max_rows = max_rows

    def parse(self, raw: bytes, filename: str) -> ParsedPortfolio:
        """Parse an uploaded file, dispatching on its extension."""
        ext = Path(filename).suffix.lower()
        if ext in CSV_EXTENSIONS:
            return self.parse_csv(raw)
        if ext in EXCEL_EXTENSIONS:
            return self.parse_excel(raw)
        raise UnsupportedFileError(filename)

    def parse_csv(self, raw: bytes) -> ParsedPortfolio:
        """Parse raw CSV bytes (comma, semicolon or tab separated)."""
        warnings: list[str] = []
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            # Spreadsheet exports from Spanish-locale Excel are often Latin-1
            text = raw.decode("latin-1")
            warnings.append("File is not valid UTF-8; decoded as Latin-1.")

        if not text.strip():
            return ParsedPortfolio(errors=["CSV file is empty or has no header row."])

        try:
            dialect = csv.Sniffer().sniff(text.splitlines()[0], delimiters=",;\t")
            delimiter = dialect.delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.DictReader(io.StringIO(text), delimiter=delimiter)
        if not reader.fieldnames:
            return ParsedPortfolio(errors=["CSV file is empty or has no header row."])

        headers = [h for h in reader.fieldnames if h is not None]
        result = self.parse_rows(headers, reader)
        result.warnings[:0] = warnings
        return result

    def parse_excel(self, raw: bytes) -> ParsedPortfolio:
        """Parse the first sheet of an Excel workbook."""
        try:
            frame = pd.read_excel(io.BytesIO(raw), sheet_name=0, dtype=object)
        except Exception as exc:
            logger.warning(f"Excel parsing failed: {exc}")
            return ParsedPortfolio(errors=[f"Excel parsing error: {exc}"])

        if frame.empty:
            return ParsedPortfolio(
                errors=["File must contain at least a header row and one data row"]
            )

        headers = [str(column) for column in frame.columns]
        frame.columns = headers
        return self.parse_rows(headers, frame.to_dict(orient="records"))

    def parse_rows(self, headers: list[str], rows) -> ParsedPortfolio:
        """Map sniffed columns and convert each row to an Asset."""
        result = ParsedPortfolio()

        columns: dict[str, Optional[str]] = {}
        claimed: set[str] = set()
        for field_name, aliases in COLUMN_ALIASES.items():
            column = find_column(headers, aliases, claimed)
            columns[field_name] = column
            if column is not None:
                claimed.add(column)
        logger.debug(f"Column mapping: {columns}")

        if columns["name"] is None:
            result.errors.append(
                'Could not find "Activo" column. Expected: Activo, Asset, Nombre, '
                "Name, Descripcion, or Description"
            )
        if columns["amount"] is None:
            result.errors.append(
                'Could not find "Monto Moneda Origen" column. Expected: Monto Moneda '
                "Origen, Monto_Moneda_Origen, Current_Value, Valor_Actual, or Amount"
            )
        if result.errors:
            return result

        for row_num, row in enumerate(rows, start=2):  # Header is row 1
            if row_num - 1 > self._max_rows:
                result.errors.append(
                    f"Exceeded maximum of {self._max_rows} rows. Extra rows ignored."
                )
                break
            try:
                self._parse_row(row, columns, row_num, result)
            except (ValueError, ArithmeticError) as exc:
                result.errors.append(f"Row {row_num}: Error processing row - {exc}")

        for message in result.errors:
            logger.warning(message)
        logger.info(
            f"Parsed {len(result.assets)} assets "
            f"({len(result.errors)} errors, {len(result.warnings)} warnings)"
        )
        return result

    def _parse_row(
        self,
        row: dict[str, Any],
        columns: dict[str, Optional[str]],
        row_num: int,
        result: ParsedPortfolio,
    ) -> None:
        """Parse one row into result, recording row-level errors and warnings."""

        def field(name: str) -> Any:
            column = columns.get(name)
            return row.get(column) if column is not None else None

        name = _text(field("name"))
        amount = parse_amount(field("amount"))

        if not name and amount == 0:
            return  # Blank line

        quantity = parse_amount(field("quantity")) if columns["quantity"] else None
        label = _text(field("category"))
        isin = _text(field("isin"))
        nemo_local = _text(field("nemo_local"))
        currency = _text(field("currency"))

        errors: list[str] = []
        if not name:
            errors.append(f"Row {row_num}: Missing asset name (Activo)")
        if amount <= 0:
            errors.append(f"Row {row_num}: Invalid or missing amount (Monto Moneda Origen)")
        if errors:
            result.errors.extend(errors)
            return

        symbol = nemo_local or isin or name.split(" ")[0] or f"ASSET_{row_num}"
        if not nemo_local and not isin:
            result.warnings.append(
                f"Row {row_num}: No identifier found (ISIN, Nemo Local, or Symbol); "
                f"using '{symbol}'"
            )

        has_quantity = quantity is not None and quantity > 0
        result.assets.append(
            Asset(
                symbol=symbol,
                name=name,
                category=normalize_category(label) if label else AssetCategory.OTHER,
                current_value=amount,
                shares=quantity if has_quantity else None,
                price=amount / quantity if has_quantity else None,
                currency=normalize_currency(currency) if currency else None,
                isin=isin or None,
                nemo_local=nemo_local or None,
            )
        )
