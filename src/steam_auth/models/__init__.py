"""Data models for Steam users."""
