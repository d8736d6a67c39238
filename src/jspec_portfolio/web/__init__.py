"""Web interface for the JSPEC portfolio."""
