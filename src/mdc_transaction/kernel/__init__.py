"""Kernel — error hierarchy and value types shared by every layer."""
