"""A maze arcade game: collect cash, find the antiseptic and escape the virus."""

__version__ = "0.1.0"