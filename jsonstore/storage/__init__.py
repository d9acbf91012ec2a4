"""Persistence layer: abstract interface and the JSON file implementation."""
