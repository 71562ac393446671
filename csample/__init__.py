"""csample: systematic and random sampling of CWB concordances."""

__version__ = "0.1.0"
