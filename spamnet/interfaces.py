"""Abstract interfaces shared by layers, optimizers and loss functions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .tensor import Tensor


class Optimizer(ABC):
    """Updates parameter tensors in place from their gradients."""

    @abstractmethod
    def update(self, params: Tensor, gradients: Tensor) -> None:
        """Adjust ``params`` in place using ``gradients``."""

    def step(self) -> None:
        """Advance the optimizer by one batch; nothing to do by default."""


class Layer(ABC):
    """One stage of a network, able to run forwards and backwards."""

    @abstractmethod
    def forward(self, x: Tensor) -> Tensor:
        """Compute the layer's output for the batch ``x``."""

    @abstractmethod
    def backward(self, gradients: Tensor) -> Tensor:
        """Return the gradient with respect to the last input."""

    def update_params(self, optimizer: Optimizer) -> None:
        """Let ``optimizer`` adjust the layer's parameters; none by default."""


class Loss(ABC):
    """A loss value and its gradient for one prediction and its target."""

    @abstractmethod
    def loss(self) -> float:
        """Return the scalar loss."""

    @abstractmethod
    def loss_gradient(self) -> Tensor:
        """Return the gradient of the loss with respect to the prediction."""