"""Framework primitives shared by every component."""
