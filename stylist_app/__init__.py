"""Application wiring for the wardrobe stylist service."""
