"""HTTP API for the contract wizard."""
