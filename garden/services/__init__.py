"""High-level workflows used by the CLI."""
