"""Adapters implementing the protocols in ``crowdtrack.core.protocols``."""
