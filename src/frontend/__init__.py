"""Command-line and Flask frontends for the textmapper locator."""
