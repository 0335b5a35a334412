"""
FastMCP server definition for BrewCraft.
"""

from fastmcp import FastMCP

from mcp_brewcraft.tools import register_tools

# Create the MCP server
mcp = FastMCP(
    "mcp-brewcraft",
    instructions=(
        "Homebrew recipe design: gravity, bitterness, colour and nutrition "
        "estimates, beer style matching, ingredients and priming sugar"
    ),
)

# Register all tools
register_tools(mcp)
