"""Core entity definitions for People Service."""
