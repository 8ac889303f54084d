"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the API and the
pydantic-ai provider calls.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (remote export is skipped without it)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. Without a token, logs stay
    local and the application keeps running.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire and instrument pydantic-ai.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment name
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="deathnote-api",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire="if-token-present",
        )
        logfire.instrument_pydantic_ai()

        cls._initialized = True
