"""Prompt composition, the completion call and the /api routes."""
