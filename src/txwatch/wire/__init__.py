"""Typed shapes for node responses and the JSON Schemas that guard them."""
