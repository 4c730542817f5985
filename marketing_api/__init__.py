"""HTTP API over static marketing campaign data."""
