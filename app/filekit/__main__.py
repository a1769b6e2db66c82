"""Allow running filekit as ``python -m filekit``."""

from filekit.cli.main import app

app()
