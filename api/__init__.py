"""Password Analyzer REST API."""
