"""bookstock — stock keeping for a small book catalog."""

__version__ = "0.1.0"
