"""Application document generation service."""
