"""Configuration and logging helpers shared by the application."""
