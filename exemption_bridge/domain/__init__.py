"""Domain layer for Exemption Bridge.

Pure values and errors. Imports nothing from the other layers.
"""
