"""HTTP surface for the clean-orders service."""
