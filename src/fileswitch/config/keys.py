"""Configuration keys read by the switching layer."""

DELEGATE_KEY = "io-impl-delegate"
"""Registered name of the backend every call is delegated to. Required."""
