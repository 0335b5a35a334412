"""
mcp-brewcraft: MCP server for BrewCraft homebrew recipes.
"""

__version__ = "0.1.0"
