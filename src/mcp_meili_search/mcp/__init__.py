"""MCP server, tool schemas and prompts."""
