"""Pure-Python tensors, neural network layers and a bag-of-words spam text loader."""

__version__ = "0.1.0"

__all__ = [
    "activation",
    "cli",
    "dense",
    "interfaces",
    "loss",
    "network",
    "optimizer",
    "tensor",
    "text_loader",
]