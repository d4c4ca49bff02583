"""Persistence of block events and storage-state checkpoints."""
