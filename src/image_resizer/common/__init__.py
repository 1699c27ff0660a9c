"""Schemas, data URLs and page-view state shared by the routes."""
