"""Extraction engine and supporting modules for contextualizer."""
