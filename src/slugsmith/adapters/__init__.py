"""Adapters – bindings to host persistence frameworks."""
