"""Fully connected (dense, linear) layer."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .layer import Layer

_rng = np.random.default_rng()


class FC(Layer):
    """Every output is a weighted sum of all inputs plus a bias.

    ``weights`` is flat; the weight from input ``j`` to output ``i`` sits at
    ``i + j * out_size``. Weights and biases start uniform in [-1, 1).
    """

    name = "FC"
    trainable = True

    def __init__(self, in_size: int, out_size: int) -> None:
        super().__init__(in_size, out_size)
        self.weights = _rng.uniform(-1.0, 1.0, in_size * out_size).astype(np.float32)
        self.bias = _rng.uniform(-1.0, 1.0, out_size).astype(np.float32)
        self.weight_grads = np.zeros(in_size * out_size, dtype=np.float32)
        self.bias_grads = np.zeros(out_size, dtype=np.float32)

    @property
    def _matrix(self) -> np.ndarray:
        return self.weights.reshape(self.in_size, self.out_size)

    def forward(self, data: ArrayLike) -> np.ndarray:
        x = self._take(data, self.in_size, exact=True)
        self.out_data = self.bias + x @ self._matrix
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.out_size, exact=True) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        x = self._take(data_in, self.in_size, exact=True)
        g = self._take(grads, self.out_size, exact=True)
        self.weight_grads += (np.outer(x, g) * np.float32(2.0)).reshape(-1)
        self.bias_grads += g
        self.input_grads = (self._matrix @ g) * np.float32(2.0) / np.float32(self.out_size)
        return self.input_grads

    def params(self) -> list[np.ndarray]:
        return [self.weights, self.bias]

    def grads(self) -> list[np.ndarray]:
        return [self.weight_grads, self.bias_grads]

    def param_grad_pairs(self) -> list[tuple[np.ndarray, np.ndarray]]:
        return [(self.weights, self.weight_grads), (self.bias, self.bias_grads)]