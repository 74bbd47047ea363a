"""CLI layer for parchi application."""
