"""Local HTTP surface that serves the dashboard and receives its messages."""
