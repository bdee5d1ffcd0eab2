"""
API tests for analysis endpoints.

Tests cover:
- Gap analysis of the seeded sample portfolio
- Profile and tolerance overrides
- Stored tolerance bands feeding the analysis
- CSV downloads
- Error responses
"""

import csv
import io
from decimal import Decimal

from fastapi.testclient import TestClient


def _by_category(items: list[dict]) -> dict[str, dict]:
    return {item["category"]: item for item in items}


def _csv_rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


# =============================================================================
# ANALYSIS TESTS
# =============================================================================


class TestAnalyzeAPI:
    """Tests for GET/POST /analysis/{portfolio_id}."""

    def test_sample_portfolio(self, client: TestClient):
        """
        GIVEN the seeded Johnson Family Trust portfolio
        WHEN I GET /analysis/portfolio-1
        THEN every category is reported in canonical order with its status
        """
        response = client.get("/analysis/portfolio-1")

        assert response.status_code == 200
        data = response.json()
        assert data["client_name"] == "Johnson Family Trust"
        assert data["profile_id"] == "usd-moderate"
        assert Decimal(data["total_value"]) == Decimal("560000")
        assert [c["category"] for c in data["categories"]] == [
            "Fixed Income",
            "Equities",
            "Alternative Investments",
            "Caja",
            "Balanceado",
            "Other",
        ]
        statuses = {c["category"]: c["status"] for c in data["categories"]}
        assert statuses["Equities"] == "Over"
        assert statuses["Fixed Income"] == "On Target"
        assert statuses["Balanceado"] == "Under"
        assert data["generated_at"] is not None

    def test_sample_recommendations(self, client: TestClient):
        data = client.get("/analysis/portfolio-1").json()

        recs = _by_category(data["recommendations"])
        assert list(recs) == ["Equities", "Alternative Investments", "Balanceado"]
        assert recs["Equities"]["action"] == "Sell"
        assert abs(Decimal(recs["Equities"]["amount"]) - Decimal("61000")) < Decimal("0.01")
        assert [a["symbol"] for a in recs["Alternative Investments"]["assets"]] == ["VNQ"]
        assert recs["Alternative Investments"]["assets"][0]["action"] == "Buy"

    def test_asset_breakdown_included(self, client: TestClient):
        data = client.get("/analysis/portfolio-1").json()

        equities = _by_category(data["categories"])["Equities"]
        assert [a["symbol"] for a in equities["asset_breakdown"]] == ["VTI", "VXUS", "QQQ"]
        assert equities["asset_breakdown"][0]["status"] == "Over"

    def test_other_profile_query(self, client: TestClient):
        response = client.get("/analysis/portfolio-1", params={"profile_id": "usd-aggressive"})

        assert response.status_code == 200
        data = response.json()
        assert data["profile_id"] == "usd-aggressive"
        assert data["profile_name"]

    def test_post_with_wide_bands(self, client: TestClient):
        """
        GIVEN the sample portfolio
        WHEN I POST an analysis with a 20-point band on every category
        THEN nothing is recommended
        """
        bands = [
            {"category": category, "tolerance": "20"}
            for category in [
                "Fixed Income",
                "Equities",
                "Alternative Investments",
                "Caja",
                "Balanceado",
                "Other",
            ]
        ]

        response = client.post("/analysis/portfolio-1", json={"tolerance_bands": bands})

        assert response.status_code == 200
        data = response.json()
        assert data["recommendations"] == []
        assert len(data["tolerance_bands"]) == 6

    def test_post_without_body_fields_uses_defaults(self, client: TestClient):
        response = client.post("/analysis/portfolio-1", json={})

        assert response.status_code == 200
        assert len(response.json()["recommendations"]) == 3

    def test_stored_bands_feed_analysis(self, client: TestClient):
        """
        GIVEN the Equities band widened to 15 points
        WHEN I analyze the sample portfolio
        THEN Equities (10.9 over) reads On Target and is not recommended
        """
        client.put("/tolerances", json={"bands": [{"category": "Equities", "tolerance": "15"}]})

        data = client.get("/analysis/portfolio-1").json()

        assert _by_category(data["categories"])["Equities"]["status"] == "On Target"
        assert "Equities" not in _by_category(data["recommendations"])

    def test_negative_band_returns_422(self, client: TestClient):
        response = client.post(
            "/analysis/portfolio-1",
            json={"tolerance_bands": [{"category": "Equities", "tolerance": "-1"}]},
        )

        assert response.status_code == 422

    def test_missing_portfolio_returns_404(self, client: TestClient):
        response = client.get("/analysis/missing")

        assert response.status_code == 404
        assert response.json() == {
            "error": "NOT_FOUND",
            "message": "Portfolio not found: missing",
        }

    def test_missing_profile_returns_404(self, client: TestClient):
        response = client.get("/analysis/portfolio-1", params={"profile_id": "nope"})

        assert response.status_code == 404
        assert response.json()["message"] == "Profile not found: nope"


# =============================================================================
# EXPORT TESTS
# =============================================================================


class TestExportAPI:
    """Tests for CSV downloads."""

    def test_export_gaps(self, client: TestClient):
        response = client.get("/analysis/portfolio-1/export/gaps")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.headers["content-disposition"] == (
            'attachment; filename="Johnson_Family_Trust_Gap_Analysis.csv"'
        )
        rows = _csv_rows(response.text)
        assert rows[0][0] == "Category"
        assert len(rows) == 7
        assert rows[2][0] == "Equities"
        assert rows[2][-1] == "Over"

    def test_export_recommendations(self, client: TestClient):
        """
        GIVEN the sample portfolio with three categories off target
        WHEN I download the recommendations
        THEN there is one row per asset trade (3 + 1 + 1)
        """
        response = client.get("/analysis/portfolio-1/export/recommendations")

        assert response.status_code == 200
        assert "Johnson_Family_Trust_Recommendations.csv" in (
            response.headers["content-disposition"]
        )
        rows = _csv_rows(response.text)
        assert len(rows) == 6
        assert [r[3] for r in rows[1:4]] == ["VTI", "VXUS", "QQQ"]

    def test_export_report(self, client: TestClient):
        response = client.get("/analysis/portfolio-1/export/report")

        assert response.status_code == 200
        assert "Johnson_Family_Trust_Rebalancing_Report.csv" in (
            response.headers["content-disposition"]
        )
        rows = _csv_rows(response.text)
        assert rows[0] == ["Client", "Johnson Family Trust"]
        assert rows[3] == ["Total Value", "560000"]

    def test_export_non_latin_client_name(self, client: TestClient):
        """
        GIVEN a portfolio whose client name is written in CJK characters
        WHEN I download its report
        THEN the header carries an ASCII filename and a UTF-8 filename*
        """
        created = client.post("/portfolios", json={
            "client_name": "李明",
            "profile_id": "usd-moderate",
            "assets": [{"symbol": "BND", "name": "Bond Fund",
                        "category": "Fixed Income", "current_value": "1000"}],
        })
        portfolio_id = created.json()["portfolio_id"]

        response = client.get(f"/analysis/{portfolio_id}/export/report")

        assert response.status_code == 200
        disposition = response.headers["content-disposition"]
        assert 'filename="Rebalancing_Report.csv"' in disposition
        assert (
            "filename*=UTF-8''%E6%9D%8E%E6%98%8E_Rebalancing_Report.csv" in disposition
        )
        assert _csv_rows(response.text)[0] == ["Client", "李明"]

    def test_export_missing_portfolio(self, client: TestClient):
        response = client.get("/analysis/missing/export/report")

        assert response.status_code == 404
