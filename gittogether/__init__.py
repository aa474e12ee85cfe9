"""Draw GitHub contributor statistics for chosen periods as SVG cards."""

__version__ = "0.1.0"