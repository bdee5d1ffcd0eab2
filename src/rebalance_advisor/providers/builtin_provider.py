"""Built-in profile catalogue and sample portfolios for offline use."""

from datetime import datetime
from decimal import Decimal

from rebalance_advisor.core.timezone import local_tz
from rebalance_advisor.domain.models import (
    Asset,
    AssetAllocation,
    AssetCategory,
    CATEGORY_ORDER,
    Currency,
    InvestmentProfile,
    Portfolio,
    RiskLevel,
)

FI = AssetCategory.FIXED_INCOME
EQ = AssetCategory.EQUITIES
ALT = AssetCategory.ALTERNATIVE_INVESTMENTS
CAJA = AssetCategory.CAJA
BAL = AssetCategory.BALANCEADO

# (profile_id, name, description, currency, risk, category targets in
#  CATEGORY_ORDER, [(symbol, name, category, target %, category %)])
_PROFILES = [
    (
        "usd-preservation", "Capital Preservation",
        "Ultra-conservative, capital protection focused",
        Currency.USD, RiskLevel.PRESERVATION, (70, 10, 5, 10, 5, 0),
        [
            ("BND", "Vanguard Total Bond Market ETF", FI, "25", "35.7"),
            ("TLT", "iShares 20+ Year Treasury Bond ETF", FI, "20", "28.6"),
            ("VCIT", "Vanguard Intermediate-Term Corporate Bond ETF", FI, "15", "21.4"),
            ("VTEB", "Vanguard Tax-Exempt Bond ETF", FI, "10", "14.3"),
            ("VYM", "Vanguard High Dividend Yield ETF", EQ, "6", "60.0"),
            ("VTI", "Vanguard Total Stock Market ETF", EQ, "4", "40.0"),
            ("GLD", "SPDR Gold Shares", ALT, "5", "100.0"),
            ("VMOT", "Vanguard Short-Term Treasury ETF", CAJA, "10", "100.0"),
            ("VBAL", "Vanguard Balanced ETF", BAL, "5", "100.0"),
        ],
    ),
    (
        "usd-conservative", "Conservative Growth",
        "Low risk, income and modest growth",
        Currency.USD, RiskLevel.CONSERVATIVE, (50, 25, 10, 10, 5, 0),
        [
            ("BND", "Vanguard Total Bond Market ETF", FI, "20", "40.0"),
            ("TLT", "iShares 20+ Year Treasury Bond ETF", FI, "15", "30.0"),
            ("VCIT", "Vanguard Intermediate-Term Corporate Bond ETF", FI, "10", "20.0"),
            ("VTEB", "Vanguard Tax-Exempt Bond ETF", FI, "5", "10.0"),
            ("VTI", "Vanguard Total Stock Market ETF", EQ, "15", "60.0"),
            ("VXUS", "Vanguard Total International Stock ETF", EQ, "10", "40.0"),
            ("VNQ", "Vanguard Real Estate ETF", ALT, "6", "60.0"),
            ("GLD", "SPDR Gold Shares", ALT, "4", "40.0"),
            ("VMOT", "Vanguard Short-Term Treasury ETF", CAJA, "10", "100.0"),
            ("VBAL", "Vanguard Balanced ETF", BAL, "5", "100.0"),
        ],
    ),
    (
        "usd-moderate", "Moderate Growth",
        "Balanced risk, growth and income",
        Currency.USD, RiskLevel.MODERATE, (35, 40, 10, 5, 10, 0),
        [
            ("BND", "Vanguard Total Bond Market ETF", FI, "15", "42.9"),
            ("TLT", "iShares 20+ Year Treasury Bond ETF", FI, "10", "28.6"),
            ("VCIT", "Vanguard Intermediate-Term Corporate Bond ETF", FI, "10", "28.6"),
            ("VTI", "Vanguard Total Stock Market ETF", EQ, "20", "50.0"),
            ("VXUS", "Vanguard Total International Stock ETF", EQ, "15", "37.5"),
            ("QQQ", "Invesco QQQ Trust", EQ, "5", "12.5"),
            ("VNQ", "Vanguard Real Estate ETF", ALT, "6", "60.0"),
            ("GLD", "SPDR Gold Shares", ALT, "4", "40.0"),
            ("VMOT", "Vanguard Short-Term Treasury ETF", CAJA, "5", "100.0"),
            ("VBAL", "Vanguard Balanced ETF", BAL, "10", "100.0"),
        ],
    ),
    (
        "usd-aggressive", "Aggressive Growth",
        "High risk, maximum growth potential",
        Currency.USD, RiskLevel.AGGRESSIVE, (15, 60, 15, 5, 5, 0),
        [
            ("BND", "Vanguard Total Bond Market ETF", FI, "10", "66.7"),
            ("VCIT", "Vanguard Intermediate-Term Corporate Bond ETF", FI, "5", "33.3"),
            ("VTI", "Vanguard Total Stock Market ETF", EQ, "25", "41.7"),
            ("QQQ", "Invesco QQQ Trust", EQ, "20", "33.3"),
            ("VXUS", "Vanguard Total International Stock ETF", EQ, "15", "25.0"),
            ("VNQ", "Vanguard Real Estate ETF", ALT, "8", "53.3"),
            ("GLD", "SPDR Gold Shares", ALT, "4", "26.7"),
            ("PDBC", "Invesco Optimum Yield Diversified Commodity", ALT, "3", "20.0"),
            ("VMOT", "Vanguard Short-Term Treasury ETF", CAJA, "5", "100.0"),
            ("VBAL", "Vanguard Balanced ETF", BAL, "5", "100.0"),
        ],
    ),
    (
        "clp-preservation", "Preservación de Capital",
        "Ultra conservador, enfocado en protección de capital",
        Currency.CLP, RiskLevel.PRESERVATION, (70, 5, 5, 15, 5, 0),
        [
            ("BTU", "Bono del Tesoro de Chile 10 años", FI, "30", "42.9"),
            ("BCP", "Bonos Corporativos Chile", FI, "25", "35.7"),
            ("UF", "Depósitos UF", FI, "15", "21.4"),
            ("IPSA", "Índice IPSA", EQ, "5", "100.0"),
            ("GOLD-CLP", "Oro en Pesos Chilenos", ALT, "5", "100.0"),
            ("DAP", "Depósitos a Plazo", CAJA, "10", "66.7"),
            ("MM-CLP", "Money Market CLP", CAJA, "5", "33.3"),
            ("FBAL-CLP", "Fondo Balanceado Chile", BAL, "5", "100.0"),
        ],
    ),
    (
        "clp-conservative", "Crecimiento Conservador",
        "Bajo riesgo, ingresos y crecimiento modesto",
        Currency.CLP, RiskLevel.CONSERVATIVE, (55, 20, 10, 10, 5, 0),
        [
            ("BTU", "Bono del Tesoro de Chile 10 años", FI, "25", "45.5"),
            ("BCP", "Bonos Corporativos Chile", FI, "20", "36.4"),
            ("UF", "Depósitos UF", FI, "10", "18.2"),
            ("IPSA", "Índice IPSA", EQ, "15", "75.0"),
            ("IGPA", "Índice General de Precios de Acciones", EQ, "5", "25.0"),
            ("REITS-CLP", "REITs Chile", ALT, "6", "60.0"),
            ("GOLD-CLP", "Oro en Pesos Chilenos", ALT, "4", "40.0"),
            ("DAP", "Depósitos a Plazo", CAJA, "10", "100.0"),
            ("FBAL-CLP", "Fondo Balanceado Chile", BAL, "5", "100.0"),
        ],
    ),
    (
        "clp-moderate", "Crecimiento Moderado",
        "Riesgo equilibrado, crecimiento e ingresos",
        Currency.CLP, RiskLevel.MODERATE, (35, 40, 10, 5, 10, 0),
        [
            ("BTU", "Bono del Tesoro de Chile 10 años", FI, "18", "51.4"),
            ("BCP", "Bonos Corporativos Chile", FI, "12", "34.3"),
            ("UF", "Depósitos UF", FI, "5", "14.3"),
            ("IPSA", "Índice IPSA", EQ, "25", "62.5"),
            ("IGPA", "Índice General de Precios de Acciones", EQ, "15", "37.5"),
            ("REITS-CLP", "REITs Chile", ALT, "6", "60.0"),
            ("GOLD-CLP", "Oro en Pesos Chilenos", ALT, "4", "40.0"),
            ("DAP", "Depósitos a Plazo", CAJA, "5", "100.0"),
            ("FBAL-CLP", "Fondo Balanceado Chile", BAL, "10", "100.0"),
        ],
    ),
    (
        "clp-aggressive", "Crecimiento Agresivo",
        "Alto riesgo, máximo potencial de crecimiento",
        Currency.CLP, RiskLevel.AGGRESSIVE, (20, 55, 15, 5, 5, 0),
        [
            ("BTU", "Bono del Tesoro de Chile 10 años", FI, "12", "60.0"),
            ("BCP", "Bonos Corporativos Chile", FI, "8", "40.0"),
            ("IPSA", "Índice IPSA", EQ, "30", "54.5"),
            ("IGPA", "Índice General de Precios de Acciones", EQ, "20", "36.4"),
            ("MSCI-CL", "MSCI Chile", EQ, "5", "9.1"),
            ("REITS-CLP", "REITs Chile", ALT, "8", "53.3"),
            ("GOLD-CLP", "Oro en Pesos Chilenos", ALT, "4", "26.7"),
            ("COMM-CLP", "Commodities Chile", ALT, "3", "20.0"),
            ("DAP", "Depósitos a Plazo", CAJA, "5", "100.0"),
            ("FBAL-CLP", "Fondo Balanceado Chile", BAL, "5", "100.0"),
        ],
    ),
]

# symbol -> (name, category, current value, shares, price)
_SAMPLE_ASSETS: dict[str, tuple[str, AssetCategory, int, int, int]] = {
    "BND": ("Vanguard Total Bond Market ETF", FI, 80000, 800, 100),
    "VTI": ("Vanguard Total Stock Market ETF", EQ, 120000, 500, 240),
    "VNQ": ("Vanguard Real Estate ETF", ALT, 30000, 300, 100),
    "TLT": ("iShares 20+ Year Treasury Bond ETF", FI, 60000, 600, 100),
    "QQQ": ("Invesco QQQ Trust", EQ, 90000, 300, 300),
    "GLD": ("SPDR Gold Shares", ALT, 20000, 100, 200),
    "JPGB": ("JPM Global Corporate Bond ETF", FI, 45000, 450, 100),
    "VXUS": ("Vanguard Total International Stock ETF", EQ, 75000, 1250, 60),
    "VMOT": ("Vanguard Short-Term Treasury ETF", CAJA, 25000, 250, 100),
    "VBAL": ("Vanguard Balanced ETF", BAL, 15000, 150, 100),
}

# (portfolio_id, client, profile_id, symbols held, last updated)
_SAMPLE_PORTFOLIOS = [
    (
        "portfolio-1", "Johnson Family Trust", "usd-moderate",
        ["BND", "VTI", "VNQ", "TLT", "QQQ", "GLD", "JPGB", "VXUS", "VMOT", "VBAL"],
        datetime(2024, 1, 15),
    ),
    (
        "portfolio-2", "Smith Retirement Account", "usd-conservative",
        ["BND", "VTI", "TLT", "GLD", "JPGB", "VXUS", "VMOT"],
        datetime(2024, 1, 10),
    ),
]


def _sample_asset(symbol: str) -> Asset:
    name, category, value, shares, price = _SAMPLE_ASSETS[symbol]
    return Asset(
        symbol=symbol,
        name=name,
        category=category,
        current_value=Decimal(value),
        shares=Decimal(shares),
        price=Decimal(price),
        currency="USD",
    )


class BuiltinProfileProvider:
    """
    Provider backed by the built-in USD and CLP model profiles.

    Four risk levels per currency, plus two USD demo portfolios.
    """

    def load_profiles(self) -> list[InvestmentProfile]:
        """Return fresh copies of the built-in profiles."""
        profiles: list[InvestmentProfile] = []
        for profile_id, name, description, currency, risk, targets, allocations in _PROFILES:
            profiles.append(
                InvestmentProfile(
                    profile_id=profile_id,
                    name=name,
                    description=description,
                    currency=currency,
                    risk_level=risk,
                    target_allocations={
                        category: Decimal(value)
                        for category, value in zip(CATEGORY_ORDER, targets)
                    },
                    asset_allocations=[
                        AssetAllocation(
                            symbol=symbol,
                            name=asset_name,
                            category=category,
                            target_percentage=Decimal(target),
                            category_percentage=Decimal(within),
                        )
                        for symbol, asset_name, category, target, within in allocations
                    ],
                )
            )
        return profiles

    def sample_portfolios(self) -> list[Portfolio]:
        """Return the demo portfolios, stamped in the advisor timezone."""
        tz = local_tz()
        return [
            Portfolio.from_assets(
                portfolio_id=portfolio_id,
                client_name=client_name,
                profile_id=profile_id,
                currency=Currency.USD,
                assets=[_sample_asset(symbol) for symbol in symbols],
                last_updated=tz.localize(updated),
            )
            for portfolio_id, client_name, profile_id, symbols, updated in _SAMPLE_PORTFOLIOS
        ]
