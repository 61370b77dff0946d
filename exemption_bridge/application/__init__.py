"""Application layer for Exemption Bridge.

Use cases and the ports they depend on. Imports from domain/ only.
"""
