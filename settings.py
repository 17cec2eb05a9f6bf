"""Runtime configuration read from environment variables."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from scraper.fetcher import DEFAULT_USER_AGENT


@dataclass(frozen=True)
class Settings:
    log_level: str = 'INFO'
    request_timeout_seconds: float = 10.0
    request_delay_seconds: float = 1.5
    report_path: str = 'data/scrape-results.json'
    spotlight_path: str = 'data/spotlight.json'
    report_table_name: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Settings with defaults for anything unset
        """
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get('LOG_LEVEL', cls.log_level),
            request_timeout_seconds=float(
                env.get('REQUEST_TIMEOUT_SECONDS', cls.request_timeout_seconds)
            ),
            request_delay_seconds=float(
                env.get('REQUEST_DELAY_SECONDS', cls.request_delay_seconds)
            ),
            report_path=env.get('REPORT_PATH', cls.report_path),
            spotlight_path=env.get('SPOTLIGHT_PATH', cls.spotlight_path),
            report_table_name=env.get('REPORT_TABLE_NAME') or None,
            user_agent=env.get('USER_AGENT', cls.user_agent),
        )
