"""Loss functions comparing predictions with targets."""

from __future__ import annotations

import math

from .interfaces import Loss
from .tensor import Tensor

_EPSILON = 1e-7


def _check_sizes(y_predicted: Tensor, y_true: Tensor) -> None:
    if y_predicted.size != y_true.size:
        raise ValueError("Prediction and target sizes do not match")


class MSELoss(Loss):
    """Mean squared error."""

    def __init__(self, y_predicted: Tensor, y_true: Tensor) -> None:
        _check_sizes(y_predicted, y_true)
        self._pred = y_predicted
        self._true = y_true

    def loss(self) -> float:
        total = self._pred.size
        return sum((p - t) ** 2 for p, t in zip(self._pred, self._true)) / total

    def loss_gradient(self) -> Tensor:
        return (self._pred - self._true) * (2.0 / self._pred.size)


class BCELoss(Loss):
    """Binary cross-entropy with predictions clamped away from 0 and 1."""

    epsilon = _EPSILON

    def __init__(self, y_predicted: Tensor, y_true: Tensor) -> None:
        _check_sizes(y_predicted, y_true)
        self._pred = y_predicted
        self._true = y_true

    def _pairs(self):
        low, high = self.epsilon, 1 - self.epsilon
        for p, y in zip(self._pred, self._true):
            yield min(max(p, low), high), y

    def loss(self) -> float:
        total = self._pred.size
        return sum(
            -(y * math.log(p) + (1 - y) * math.log(1 - p)) for p, y in self._pairs()
        ) / total

    def loss_gradient(self) -> Tensor:
        total = self._pred.size
        return Tensor(
            *self._pred.shape,
            data=[(p - y) / (p * (1 - p) * total) for p, y in self._pairs()],
        )