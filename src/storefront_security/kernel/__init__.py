"""Kernel – error hierarchy, clock and security ports shared by every layer."""
