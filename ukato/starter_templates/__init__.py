"""Starter note templates copied into the notes directory by ``ukato init``."""
