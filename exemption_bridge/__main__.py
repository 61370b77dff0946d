"""Allow `python -m exemption_bridge`."""

from exemption_bridge.cli import app

app()
