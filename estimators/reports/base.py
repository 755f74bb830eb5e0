"""Shared Jinja2 environment for the text reports."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from estimators.formatting import format_cents, format_currency, format_percent

TEMPLATE_DIR = Path(__file__).parent / "templates"


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = format_currency
    env.filters["cents"] = format_cents
    env.filters["percent"] = format_percent
    return env
