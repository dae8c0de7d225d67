"""Kangaroute: fleet and cargo-slot management for pet-transport companies."""

__version__ = "0.1.0"
