"""Modular neural networks built from stackable layers, trained by gradient descent."""

__version__ = "0.1.8"