"""Allow ``python -m mcp_meili_search``."""

from .cli.main import app

app()
