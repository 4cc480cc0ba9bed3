"""Fully connected layer."""

from __future__ import annotations

from typing import Callable

from .interfaces import Layer, Optimizer
from .tensor import Tensor, matrix_product, transpose_2d


class Dense(Layer):
    """Affine layer ``x @ W + b`` with ``W`` of shape (in, out).

    The bias is kept as a (1, out) row so optimizers can update it like any
    other 2-D parameter.
    """

    def __init__(
        self,
        in_features: int,
        out_features: int,
        init_w: Callable[[Tensor], None],
        init_b: Callable[[Tensor], None],
    ) -> None:
        self._weights = Tensor(in_features, out_features)
        self._weight_gradient = Tensor(in_features, out_features)
        self._bias = Tensor(1, out_features)
        self._bias_gradient = Tensor(1, out_features)
        self._last_input: Tensor | None = None
        init_w(self._weights)
        init_b(self._bias)

    @property
    def weights(self) -> Tensor:
        return self._weights

    @property
    def bias(self) -> Tensor:
        return self._bias

    @property
    def weight_gradient(self) -> Tensor:
        return self._weight_gradient

    @property
    def bias_gradient(self) -> Tensor:
        return self._bias_gradient

    def forward(self, x: Tensor) -> Tensor:
        self._last_input = x
        return matrix_product(x, self._weights) + self._bias

    def backward(self, gradients: Tensor) -> Tensor:
        if self._last_input is None:
            raise RuntimeError("forward must be called before backward")
        out_features = self._weights.shape[1]
        if gradients.rank != 2 or gradients.shape[1] != out_features:
            raise ValueError("Gradient width does not match the layer's output features")
        self._weight_gradient = matrix_product(transpose_2d(self._last_input), gradients)
        values = gradients.data
        self._bias_gradient = Tensor(
            1,
            out_features,
            data=[sum(values[j::out_features]) for j in range(out_features)],
        )
        return matrix_product(gradients, transpose_2d(self._weights))

    def update_params(self, optimizer: Optimizer) -> None:
        optimizer.update(self._weights, self._weight_gradient)
        optimizer.update(self._bias, self._bias_gradient)