"""Offline upload backend."""
