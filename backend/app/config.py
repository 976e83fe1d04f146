from __future__ import annotations

from functools import lru_cache

from nen_report.settings import Settings, settings_from_env


class ApiSettings(Settings):
    api_title: str = "NEN2767 Report API"
    api_description: str = "Generates NEN2767 inspection reports (PDF + CSV) for stored submissions."
    api_version: str = "0.1.0"


@lru_cache()
def get_settings() -> ApiSettings:
    return ApiSettings(**settings_from_env())
