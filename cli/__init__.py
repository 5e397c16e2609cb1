"""Interactive command line for the asset catalog."""
