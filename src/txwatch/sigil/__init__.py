"""Transaction identity and authorization signatures."""
