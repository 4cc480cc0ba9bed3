"""Sequential neural network built from layers."""

from __future__ import annotations

import itertools
from typing import Callable

from .interfaces import Layer, Loss, Optimizer
from .optimizer import SGD
from .tensor import Tensor


def _rows(tensor: Tensor, start: int, stop: int) -> Tensor:
    cols = tensor.shape[1]
    stop = min(stop, tensor.shape[0])
    values = itertools.islice(tensor, start * cols, stop * cols)
    return Tensor(stop - start, cols, data=values)


class NeuralNetwork:
    """A stack of layers run in order forwards and in reverse backwards."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._last_output: Tensor | None = None

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def add_layer(self, layer: Layer) -> None:
        self._layers.append(layer)

    def forward(self, x: Tensor) -> Tensor:
        output = x
        for layer in self._layers:
            output = layer.forward(output)
        self._last_output = output
        return output

    def backward(self, gradients: Tensor) -> Tensor:
        """Propagate ``gradients`` through every layer; return the input gradient."""
        g = gradients
        for layer in reversed(self._layers):
            g = layer.backward(g)
        return g

    def optimize(self, learning_rate: float) -> None:
        """Apply one plain SGD update to every layer."""
        optimizer = SGD(learning_rate)
        for layer in self._layers:
            layer.update_params(optimizer)

    def predict(self, x: Tensor) -> Tensor:
        return self.forward(x)

    def train(
        self,
        x: Tensor,
        y: Tensor,
        epochs: int,
        batch_size: int,
        learning_rate: float,
        loss: Callable[[Tensor, Tensor], Loss],
        optimizer: Callable[[float], Optimizer] = SGD,
    ) -> None:
        """Fit the network with mini-batches taken in row order."""
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if x.rank != 2 or y.rank != 2:
            raise ValueError("Training data must be 2-D tensors")
        n = x.shape[0]
        if y.shape[0] != n:
            raise ValueError("Inputs and targets have different numbers of rows")
        opt = optimizer(learning_rate)
        for _ in range(epochs):
            for start in range(0, n, batch_size):
                x_batch = _rows(x, start, start + batch_size)
                y_batch = _rows(y, start, start + batch_size)
                prediction = self.forward(x_batch)
                self.backward(loss(prediction, y_batch).loss_gradient())
                for layer in self._layers:
                    layer.update_params(opt)
                opt.step()