"""
MCP server entry point for BrewCraft.

Run with: python -m mcp_brewcraft
"""

from mcp_brewcraft.app_logging import configure_logging
from mcp_brewcraft.config import get_config
from mcp_brewcraft.server import mcp


def main() -> None:
    configure_logging(get_config().log_level)
    mcp.run()


if __name__ == "__main__":
    main()
