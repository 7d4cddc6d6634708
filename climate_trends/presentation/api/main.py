"""FastAPI main application."""

import logging
import threading
from dataclasses import asdict
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ...application.services.climate_analysis_service import ClimateAnalysisService
from ...domain.entities.analysis_settings import AnalysisSettings
from ...domain.entities.climate_report import ClimateReport
from ...domain.exceptions import NoUsableDataError
from ...infrastructure.repositories.csv_weather_repository import CsvWeatherRepository
from config.settings import (
    ANALYSIS_SETTINGS,
    API_SETTINGS,
    LOG_FORMAT,
    TEMPERATURE_COLUMN,
    TIME_COLUMN,
    WEATHER_DATA_FILE,
)

logger = logging.getLogger(__name__)


# Request/Response models
class AnalysisRequest(BaseModel):
    """Request model overriding analysis settings; omitted fields keep defaults."""

    threshold_temp: Optional[float] = Field(None, description="Yearly/decade threshold (°F)")
    baseline_start_year: Optional[int] = Field(None, description="First baseline year")
    baseline_end_year: Optional[int] = Field(None, description="Last baseline year")
    hot_threshold: Optional[float] = Field(None, description="Extreme hot day threshold (°F)")
    cold_threshold: Optional[float] = Field(None, description="Extreme cold day threshold (°F)")
    smoothing_window_radius: Optional[int] = Field(
        None, ge=0, description="Half-width of the annual-cycle smoothing window (days)"
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str


def _default_service() -> ClimateAnalysisService:
    weather_repo = CsvWeatherRepository(
        str(WEATHER_DATA_FILE), time_column=TIME_COLUMN, temperature_column=TEMPERATURE_COLUMN
    )
    return ClimateAnalysisService(
        weather_repo=weather_repo, settings=AnalysisSettings.from_dict(ANALYSIS_SETTINGS)
    )


def create_app(service: Optional[ClimateAnalysisService] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Analysis service to use; built from config settings on first
            request when omitted

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=API_SETTINGS["title"],
        description=API_SETTINGS["description"],
        version=API_SETTINGS["version"],
    )
    state: Dict[str, ClimateAnalysisService] = {}
    state_lock = threading.Lock()
    if service is not None:
        state["service"] = service

    def run_analysis(settings: Optional[AnalysisSettings] = None) -> ClimateReport:
        try:
            with state_lock:
                if "service" not in state:
                    state["service"] = _default_service()
            return state["service"].analyze(settings)
        except FileNotFoundError as e:
            logger.error(f"Weather data unavailable: {e}")
            raise HTTPException(status_code=503, detail=str(e))
        except NoUsableDataError as e:
            logger.error(f"No usable data: {e}")
            raise HTTPException(status_code=422, detail=str(e))

    # API endpoints
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": API_SETTINGS["title"],
            "version": API_SETTINGS["version"],
            "endpoints": {
                "report": "/report",
                "monthly": "/monthly/{year}",
                "trend": "/trend",
                "anomalies": "/anomalies",
                "extremes": "/extremes",
                "annual_cycle": "/annual-cycle",
                "health": "/health",
            },
        }

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/report")
    def get_report() -> Dict[str, Any]:
        """Full report with the configured settings."""
        return run_analysis().to_dict()

    @app.post("/report")
    def post_report(request: AnalysisRequest) -> Dict[str, Any]:
        """
        Full report with settings overridden by the request body.

        Args:
            request: Settings to override

        Returns:
            Every derived statistic as JSON
        """
        base = state["service"].settings if "service" in state else AnalysisSettings.from_dict(
            ANALYSIS_SETTINGS
        )
        try:
            settings = base.override(**request.model_dump())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return run_analysis(settings).to_dict()

    @app.get("/monthly/{year}")
    def get_monthly(year: int) -> Dict[str, Any]:
        """Monthly averages of one year next to the all-years profile."""
        monthly = run_analysis().monthly
        profile = monthly.for_year(year)
        if profile is None:
            raise HTTPException(
                status_code=404,
                detail=f"No data for {year}; available years are {monthly.min_year}-{monthly.max_year}",
            )
        return {
            "year": profile.to_dict(),
            "all_years": monthly.all_years.to_dict(),
            "min_year": monthly.min_year,
            "max_year": monthly.max_year,
        }

    @app.get("/trend")
    def get_trend() -> Dict[str, Any]:
        """Yearly and decade averages against the threshold."""
        return run_analysis().trend.to_dict()

    @app.get("/anomalies")
    def get_anomalies() -> Dict[str, Any]:
        """Baseline, per-year and per-decade seasonal anomalies."""
        return run_analysis().anomalies.to_dict()

    @app.get("/extremes")
    def get_extremes() -> Dict[str, Any]:
        """Extreme day counts per decade."""
        return {"decades": [stats.to_dict() for stats in run_analysis().extremes]}

    @app.get("/annual-cycle")
    def get_annual_cycle() -> Dict[str, Any]:
        """Raw and smoothed day-of-year averages."""
        return {"days": [asdict(point) for point in run_analysis().annual_cycle]}

    return app


app = create_app()


def run(host: str = "0.0.0.0", port: int = 8000):
    """Serve the API with uvicorn."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
