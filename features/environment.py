"""
Behave environment configuration for cf acceptance tests.

Scenarios run the command dispatcher against the in-memory mock provider.
"""

import io
import logging

from rich.console import Console

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zone = "example.com"
    context.test_config = {
        "dns_providers": {"mock": {"zones": [context.test_zone, "example.org"]}},
        "default_provider": "mock",
    }
    context.test_environ = {
        "CLOUDFLARE_EMAIL": "admin@example.com",
        "CLOUDFLARE_KEY": "secret-key",
        "CLOUDFLARE_ZONE": context.test_zone,
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.console = Console(file=io.StringIO(), width=200, color_system=None)
    context.environ = dict(context.test_environ)
    context.outcomes = []
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    session = getattr(context, "session", None)
    if session is not None:
        session.close()
    logger.info(f"Completed scenario: {scenario.name}")
