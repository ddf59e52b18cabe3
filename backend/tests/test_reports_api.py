"""Reporting API tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from academy_reports.api.dependencies import get_app_settings, get_source_loader
from academy_reports.api.routes import api_router
from academy_reports.config import AppSettings
from academy_reports.core.exceptions import UpstreamDataError
from academy_reports.models.targets import StrategicTargetType
from academy_reports.services.sources import (
    DailyStatRecord,
    EmployeeTargetRecord,
    ExpenseRecord,
    InMemoryFinanceSource,
    TargetDefinition,
)


def build_source() -> InMemoryFinanceSource:
    return InMemoryFinanceSource(
        daily_stats=[
            DailyStatRecord(
                employee_id=1,
                date=date(2025, 1, 10),
                confirmed_customers=30,
                calculated_revenue=Decimal("12000"),
                sales_amount=Decimal("1500"),
            ),
            DailyStatRecord(employee_id=1, date=date(2025, 2, 10), calculated_revenue=Decimal("8000")),
        ],
        course_expenses=[
            ExpenseRecord(category="marketing", amount=Decimal("1000"), incurred_on=date(2025, 1, 12)),
        ],
        operational_expenses=[
            ExpenseRecord(category="salaries", amount=Decimal("9000"), incurred_on=date(2025, 3, 1)),
        ],
        targets=[
            TargetDefinition(year=2025, type=StrategicTargetType.ANNUAL_PROFIT, target_value=Decimal("100000")),
            TargetDefinition(year=2025, type=StrategicTargetType.CUSTOMERS, target_value=Decimal("400")),
        ],
        employee_targets=[
            EmployeeTargetRecord(
                employee_id=1, target_type="confirmed_customers", target_value=Decimal("20"), year=2025, month=1
            ),
        ],
    )


def _app(loader=None) -> FastAPI:
    source = build_source()

    async def load(start, end, *, employee_id=None, include_targets=False):
        return source

    app = FastAPI()
    app.include_router(api_router)
    app.dependency_overrides[get_source_loader] = lambda: loader or load
    app.dependency_overrides[get_app_settings] = lambda: AppSettings(currency_label="SAR")
    return app


async def _get(app: FastAPI, url: str, **params):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(url, params=params)


async def test_quarterly_report_payload():
    response = await _get(_app(), "/reports/quarterly", year=2025, index=1)

    assert response.status_code == 200
    payload = response.json()
    assert payload["period"]["start_date"] == "2025-01-01"
    assert payload["period"]["end_date"] == "2025-03-31"
    assert payload["total_revenue"] == 21500.0
    assert payload["total_expenses"] == 10000.0
    assert payload["net_profit"] == 11500.0
    assert payload["course_expenses_by_category"]["marketing"] == 1000.0
    assert payload["operational_expenses_by_category"]["water"] == 0.0
    assert [row["month"] for row in payload["monthly_data"]] == [1, 2, 3]
    assert sum(row["profit"] for row in payload["monthly_data"]) == payload["net_profit"]
    assert payload["reconciled"] is True


async def test_monthly_report_omits_breakdown():
    response = await _get(_app(), "/reports/monthly", year=2025, index=2)
    assert response.status_code == 200
    assert response.json()["monthly_data"] is None


async def test_invalid_period_returns_422():
    for url, params in (
        ("/reports/quarterly", {"year": 2025, "index": 5}),
        ("/reports/weekly", {"year": 2025, "index": 1}),
        ("/reports/annual", {"year": 2025, "index": 1}),
        ("/targets/progress", {"year": 2025, "period_type": "monthly", "period_index": 13}),
        ("/daily-stats/totals", {"year": 2025, "month": 0}),
    ):
        response = await _get(_app(), url, **params)
        assert response.status_code == 422, url


async def test_upstream_failure_returns_503():
    async def failing(start, end, *, employee_id=None, include_targets=False):
        raise UpstreamDataError("database unavailable")

    response = await _get(_app(failing), "/reports/annual", year=2025)
    assert response.status_code == 503


async def test_target_progress_payload():
    response = await _get(_app(), "/targets/progress", year=2025, period_type="quarterly", period_index=1)

    assert response.status_code == 200
    targets = response.json()["targets"]
    assert set(targets) == {"annual_profit", "customers"}
    assert targets["customers"]["actual"] == 30.0
    assert targets["customers"]["period_target"] == 100.0
    assert targets["customers"]["percentage"] == 30.0
    assert targets["annual_profit"]["formatted"]["period_target"] == "25,000 SAR"
    assert targets["annual_profit"]["formatted"]["annual_target"] == "100,000 SAR"


async def test_target_types_catalog():
    response = await _get(_app(), "/targets/types")
    assert response.status_code == 200
    types = {item["type"]: item for item in response.json()}
    assert len(types) == 11
    assert types["annual_profit"]["kind"] == "currency"
    assert types["customers"]["actual_source"] == "daily_stats"


async def test_daily_stat_totals_endpoint():
    response = await _get(_app(), "/daily-stats/totals", year=2025, month=1, employee_id=1)
    assert response.status_code == 200
    payload = response.json()
    assert payload["confirmed_customers"] == 30
    assert payload["total_revenue"] == 13500.0
    assert payload["total_days"] == 1


async def test_employee_target_progress_endpoint():
    response = await _get(_app(), "/targets/employees/1/progress", year=2025, month=1)
    assert response.status_code == 200
    [item] = response.json()
    assert item["current_value"] == 30.0
    assert item["percentage"] == 100.0
    assert item["status"] == "achieved"
    assert item["remaining"] == 0.0
