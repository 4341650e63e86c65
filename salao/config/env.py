"""Environment variables configuration.

Entry points call ``load_dotenv()`` before importing the package so a local
``.env`` file can override any of these.
"""

import os


def get_log_level() -> str:
    """Minimum log level: debug, info, warn or error."""
    return os.getenv("LOG_LEVEL", "info").lower()


def get_technical_user() -> str:
    """Username accepted by the technical (restricted area) login."""
    return os.getenv("SALAO_TECH_USER", "master")


def get_technical_password() -> str:
    """Password accepted by the technical (restricted area) login."""
    return os.getenv("SALAO_TECH_PASSWORD", "nico2019")


def get_company_id() -> str:
    """Company id stamped on records created during the session."""
    return os.getenv("SALAO_COMPANY_ID", "demo-company")


def get_login_delay() -> float:
    """Seconds the technical login waits before answering."""
    try:
        return float(os.getenv("SALAO_LOGIN_DELAY", "0.5"))
    except ValueError:
        return 0.5
