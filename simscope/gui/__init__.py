"""Qt overlay windows and drawers."""
