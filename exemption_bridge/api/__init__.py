"""HTTP API for Exemption Bridge."""
