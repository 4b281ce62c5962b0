"""Module-level constants shared across assetstash."""
