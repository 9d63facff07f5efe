"""Composition function runner."""
