"""Application infrastructure: settings, logging and dependency wiring."""
