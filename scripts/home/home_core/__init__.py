"""CLI Home: terminal admin menu with per-action run status."""
