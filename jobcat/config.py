"""Runtime configuration — env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
JOBCAT_* environment variables, so a host application can silence or
redirect the built-in console printer without touching code.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class CatSettings(BaseSettings):
    """Jobcat configuration with environment variable overrides.

    Examples
    --------
    Silence the console printer for a whole process::

        export JOBCAT_LOGCAT_ENABLED=false

    Or via .env file::

        JOBCAT_LOGCAT_STDERR=false
        JOBCAT_LOGCAT_SHOW_TIME=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="JOBCAT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Console (logcat) printer
    logcat_enabled: bool = True
    logcat_stderr: bool = True
    logcat_show_time: bool = False

    # Stdlib logging bridge
    bridge_prefix: str = ""  # e.g. "myapp.jobs" -> loggers "myapp.jobs.<tag>"


# Module-level singleton — import as `from jobcat.config import config`
config = CatSettings()
