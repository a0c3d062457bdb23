# -*- coding: utf-8 -*-
import os

class CatalogConfig:
    # Local catalog file (.yaml/.json). Empty -> fetch the upstream sources.
    PATH = os.getenv("RELEASECHECK_CATALOG", "")
    FETCH_TIMEOUT = float(os.getenv("RELEASECHECK_FETCH_TIMEOUT", "15"))
    # Seconds to wait before refetching after all upstream sources failed
    RETRY_INTERVAL = float(os.getenv("RELEASECHECK_RETRY_INTERVAL", "300"))

class SwaggerConfig:
    TITLE = "Release Check API"
    DESCRIPTION = "API for Release Check: job description experience sanity checks & corrections"
    VERSION = "1.0.0"

class DBConfig:
    URL = os.getenv("DATABASE_URL", "sqlite:///./releasecheck.db")
    # SQLite connections are shared with FastAPI's threadpool
    CONNECT_ARGS = {"check_same_thread": False} if URL.startswith("sqlite") else {}

class SubmissionConfig:
    GITHUB_TOKEN = os.getenv("GITHUB_TOKEN", "")
    ISSUES_URL = os.getenv(
        "RELEASECHECK_ISSUES_URL",
        "https://api.github.com/repos/Araise25/Release-Check-DB/issues",
    )
    USER_AGENT = "ReleaseCheckBot"
    TIMEOUT = float(os.getenv("RELEASECHECK_SUBMIT_TIMEOUT", "10"))
