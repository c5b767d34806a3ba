"""Evolutionary search for a firing plan that clears a wall."""
