"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
# A regular (non-editable) install places this package in site-packages, so
# set CLIMATE_DATA_DIR or CLIMATE_WEATHER_FILE there.
DATA_DIR = Path(os.getenv("CLIMATE_DATA_DIR", str(BASE_DIR / "data")))
WEATHER_DATA_FILE = Path(os.getenv("CLIMATE_WEATHER_FILE", str(DATA_DIR / "weather.csv")))

# Input columns
TIME_COLUMN = "time"
TEMPERATURE_COLUMN = "Ktemp"

# Analysis defaults (°F unless noted)
ANALYSIS_SETTINGS = {
    "threshold_temp": float(os.getenv("CLIMATE_THRESHOLD_TEMP", "55.0")),
    "baseline_start_year": int(os.getenv("CLIMATE_BASELINE_START", "1951")),
    "baseline_end_year": int(os.getenv("CLIMATE_BASELINE_END", "1980")),
    "hot_threshold": float(os.getenv("CLIMATE_HOT_THRESHOLD", "90.0")),
    "cold_threshold": float(os.getenv("CLIMATE_COLD_THRESHOLD", "20.0")),
    "smoothing_window_radius": int(os.getenv("CLIMATE_SMOOTHING_RADIUS", "3")),  # 7-day window
}

# API settings
API_SETTINGS = {
    "title": "Climate Trends API",
    "description": "Monthly climatology, warming trends, anomalies and extremes from daily temperatures",
    "version": "1.0.0",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
