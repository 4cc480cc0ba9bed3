"""Element-wise activation layers."""

from __future__ import annotations

import math

from .interfaces import Layer
from .tensor import Tensor


def _sigmoid(value: float) -> float:
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    exponent = math.exp(value)
    return exponent / (1.0 + exponent)


def _check_backward(saved: Tensor | None, gradients: Tensor) -> Tensor:
    if saved is None:
        raise RuntimeError("forward must be called before backward")
    if saved.shape != gradients.shape:
        raise ValueError("Gradient shape does not match the last forward input")
    return saved


class ReLU(Layer):
    """Rectified linear unit: ``max(0, z)``."""

    def __init__(self) -> None:
        self._z: Tensor | None = None

    def forward(self, z: Tensor) -> Tensor:
        self._z = z
        return z.map(lambda v: max(0.0, v))

    def backward(self, gradients: Tensor) -> Tensor:
        z = _check_backward(self._z, gradients)
        return z.broadcast(gradients, lambda zv, g: g if zv > 0 else 0.0)


class Sigmoid(Layer):
    """Logistic activation ``1 / (1 + exp(-z))``."""

    def __init__(self) -> None:
        self._s: Tensor | None = None

    def forward(self, z: Tensor) -> Tensor:
        self._s = z.map(_sigmoid)
        return self._s

    def backward(self, gradients: Tensor) -> Tensor:
        s = _check_backward(self._s, gradients)
        return s.broadcast(gradients, lambda sv, g: g * sv * (1 - sv))