"""Infrastructure layer for Exemption Bridge.

Adapters and stubs implementing the application ports, plus logging setup.
"""
