"""dasshboard — discover remote development hosts and open them from one dashboard."""

__version__ = "0.4.0"
