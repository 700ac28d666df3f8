"""Application-level wiring."""
