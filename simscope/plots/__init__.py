"""Plot-region renderers for the monitor."""
