"""Logging configuration helpers."""
