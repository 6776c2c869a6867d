"""Route modules for the web UI."""
