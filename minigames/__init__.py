"""Puzzle generation and validation engine for the mini-games feature."""
