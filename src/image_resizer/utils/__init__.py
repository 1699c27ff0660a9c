"""Shared helpers: media types, logging and profiling."""
