"""Small pieces shared by the tools (clock)."""
