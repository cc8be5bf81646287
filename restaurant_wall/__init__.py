"""Restaurant Wall - browse and share vegan-friendly restaurant recommendations."""

__version__ = "0.1.0"
