"""Small shared helpers for the CLI and API layers."""
