"""Resume data to LaTeX document generator."""

__version__ = "0.1.0"
