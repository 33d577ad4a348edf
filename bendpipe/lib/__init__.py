"""Support utilities shared across the package."""
