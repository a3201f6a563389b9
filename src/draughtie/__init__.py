"""Draughtie: a fixed-depth alpha-beta player for international draughts."""
