"""Ship registry: filterable listing and validated writes over a fleet of ships."""

__version__ = "0.1.0"
