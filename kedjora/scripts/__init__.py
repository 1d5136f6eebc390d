"""Command-line maintenance scripts (python -m kedjora.scripts.<name>)."""
