"""Database Base — declarative base and timestamp helper shared by all models."""
