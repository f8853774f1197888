# Copyright (c) 2025 Tolboom Medical
# Licensed under Prosperity Public License 3.0.0
# Commercial use requires separate license - see LICENSE and COMMERCIAL_LICENSE.md

# config.py
"""
Configuration settings for the lesson-to-Markdown renderer and its delivery collaborators.

Settings are read from environment variables. A .env file in the working
directory is loaded on import, so local runs can keep their webhook URL and
output directory next to the code.

Environment Variables:
    # Rendering
    LESSON2MD_PLAYGROUND_LANGUAGE: Fence language for playground files without one (default: javascript)

    # Output
    LESSON2MD_OUTPUT_DIR: Directory for rendered Markdown and diagnostics (default: tmp)
    LESSON2MD_LOG_LEVEL: Root log level for the CLI (default: INFO)

    # Webhook delivery
    LESSON2MD_WEBHOOK_URL: Endpoint receiving rendered lessons (default: empty, delivery disabled)
    LESSON2MD_WEBHOOK_TIMEOUT: Request timeout in seconds (default: 30)
    LESSON2MD_WEBHOOK_ATTEMPTS: Maximum POST attempts on transport errors (default: 3)
    LESSON2MD_DELIVERY_SOURCE: Value of the "source" field in delivery payloads (default: github-ci)
    GITHUB_ACTOR: User reported in delivery payloads (default: unknown)

Example .env file:
    LESSON2MD_WEBHOOK_URL=https://automation.example.com/webhook/scrape-result
    LESSON2MD_OUTPUT_DIR=out

Usage:
    >>> from lesson2md.config import render_settings
    >>> render_settings.default_playground_language
    'javascript'
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(ValueError):
    """Invalid value in the environment configuration"""

    pass


def _env_number(name: str, default: str, cast: type) -> float | int:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a {cast.__name__}, got {raw!r}") from e


@dataclass(frozen=True)
class RenderSettings:
    """
    Configuration for rendering and delivery.

    Attributes:
        default_playground_language: Fence language for WebpackBin files and evaluation code
            that do not declare one
        output_dir: Directory where the file manager writes outputs
        log_level: Log level name used by the CLI
        webhook_url: Delivery endpoint; empty disables webhook delivery
        webhook_timeout: Per-request timeout in seconds
        webhook_max_attempts: POST attempts before giving up on transport errors
        delivery_source: Free-form origin tag sent with every delivery
        delivery_user: User sent with every delivery (GITHUB_ACTOR in CI)
    """

    default_playground_language: str = "javascript"
    output_dir: str = "tmp"
    log_level: str = "INFO"

    webhook_url: str = ""
    webhook_timeout: float = 30.0
    webhook_max_attempts: int = 3
    delivery_source: str = "github-ci"
    delivery_user: str = "unknown"

    @classmethod
    def from_env(cls) -> "RenderSettings":
        """
        Build settings from the current environment.

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed or attempts < 1
        """
        attempts = int(_env_number("LESSON2MD_WEBHOOK_ATTEMPTS", "3", int))
        if attempts < 1:
            raise ConfigurationError(f"LESSON2MD_WEBHOOK_ATTEMPTS must be >= 1, got {attempts}")

        return cls(
            default_playground_language=os.getenv("LESSON2MD_PLAYGROUND_LANGUAGE", "javascript"),
            output_dir=os.getenv("LESSON2MD_OUTPUT_DIR", "tmp"),
            log_level=os.getenv("LESSON2MD_LOG_LEVEL", "INFO").upper(),
            webhook_url=os.getenv("LESSON2MD_WEBHOOK_URL", ""),
            webhook_timeout=float(_env_number("LESSON2MD_WEBHOOK_TIMEOUT", "30", float)),
            webhook_max_attempts=attempts,
            delivery_source=os.getenv("LESSON2MD_DELIVERY_SOURCE", "github-ci"),
            delivery_user=os.getenv("GITHUB_ACTOR", "unknown"),
        )


# Global settings instance
render_settings = RenderSettings.from_env()
