"""CLI output helpers: Rich console and JSON formatting."""
