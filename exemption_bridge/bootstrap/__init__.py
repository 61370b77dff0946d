"""Bootstrap wiring for Exemption Bridge.

Composes adapters, stubs and services. The only place outer layers
reach infrastructure from.
"""
