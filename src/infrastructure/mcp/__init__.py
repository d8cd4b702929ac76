# MCP (Model Context Protocol) Infrastructure
#
# The LLM vendor calls the hotel MCP server directly while answering a chat.
# This package only holds a client for inspecting that server.
