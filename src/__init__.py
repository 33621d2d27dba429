"""Core logic for the Daily Research Summary dashboard."""
