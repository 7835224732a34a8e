"""MCP servers exposing the deck builder as tools."""
