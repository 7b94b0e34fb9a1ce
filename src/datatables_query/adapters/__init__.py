"""Adapters – concrete DocumentStore implementations."""
