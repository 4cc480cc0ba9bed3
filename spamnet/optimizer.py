"""Gradient-descent optimizers."""

from __future__ import annotations

import math

from .interfaces import Optimizer
from .tensor import Tensor


def _check_sizes(params: Tensor, gradients: Tensor) -> None:
    if params.size != gradients.size:
        raise ValueError("Parameter and gradient sizes do not match")


class SGD(Optimizer):
    """Plain stochastic gradient descent."""

    def __init__(self, learning_rate: float = 0.01) -> None:
        self.learning_rate = learning_rate

    def update(self, params: Tensor, gradients: Tensor) -> None:
        _check_sizes(params, gradients)
        lr = self.learning_rate
        params.assign(p - lr * g for p, g in zip(params, gradients))


class Adam(Optimizer):
    """Adam with bias-corrected first and second moments per parameter tensor.

    The time step advances on every ``update`` call and on every ``step``.
    """

    def __init__(
        self,
        learning_rate: float = 0.001,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-8,
    ) -> None:
        self.learning_rate = learning_rate
        self.beta1 = beta1
        self.beta2 = beta2
        self.epsilon = epsilon
        self._t = 0
        # Keyed by id(); the tensor is kept in the entry so the id stays unique.
        self._moments: dict[int, tuple[Tensor, list[float], list[float]]] = {}

    @property
    def timestep(self) -> int:
        return self._t

    def step(self) -> None:
        self._t += 1

    def _moments_for(self, params: Tensor) -> tuple[list[float], list[float]]:
        entry = self._moments.get(id(params))
        if entry is None or entry[0] is not params or len(entry[1]) != params.size:
            entry = (params, [0.0] * params.size, [0.0] * params.size)
            self._moments[id(params)] = entry
        return entry[1], entry[2]

    def update(self, params: Tensor, gradients: Tensor) -> None:
        _check_sizes(params, gradients)
        self._t += 1
        m, v = self._moments_for(params)
        b1, b2 = self.beta1, self.beta2
        correction1 = 1 - b1 ** self._t
        correction2 = 1 - b2 ** self._t
        updated = []
        for i, (p, g) in enumerate(zip(params, gradients)):
            m[i] = b1 * m[i] + (1 - b1) * g
            v[i] = b2 * v[i] + (1 - b2) * g * g
            m_hat = m[i] / correction1
            v_hat = v[i] / correction2
            updated.append(p - self.learning_rate * m_hat / (math.sqrt(v_hat) + self.epsilon))
        params.assign(updated)