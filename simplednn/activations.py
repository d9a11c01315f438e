"""Element-wise activation layers without parameters."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .layer import Layer


class Relu(Layer):
    """Rectified linear unit: negative inputs become zero."""

    name = "ReLU"
    trainable = False

    def __init__(self, size: int) -> None:
        super().__init__(size, size)
        self.size = size

    def forward(self, data: ArrayLike) -> np.ndarray:
        x = self._take(data, self.size)
        self.out_data = np.where(x > 0, x, np.float32(0.0))
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.size) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        x = self._take(data_in, self.size)
        g = self._take(grads, self.size)
        self.input_grads = np.where(x >= 0, g, np.float32(0.0))
        return self.input_grads


class LeakyRelu(Layer):
    """Rectified linear unit that lets ``alpha`` times a negative input through."""

    name = "LeakyReLU"
    trainable = False

    def __init__(self, size: int, alpha: float) -> None:
        super().__init__(size, size)
        self.size = size
        self.alpha = np.float32(alpha)

    def forward(self, data: ArrayLike) -> np.ndarray:
        x = self._take(data, self.size)
        self.out_data = np.where(x > 0, x, self.alpha * x)
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.size) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        x = self._take(data_in, self.size)
        g = self._take(grads, self.size)
        self.input_grads = np.where(x > 0, g, self.alpha * g)
        return self.input_grads


class Sigmoid(Layer):
    """Logistic function ``1 / (1 + e**-x)``."""

    name = "Sigmoid"
    trainable = False

    def __init__(self, size: int) -> None:
        super().__init__(size, size)
        self.size = size

    def forward(self, data: ArrayLike) -> np.ndarray:
        x = self._take(data, self.size)
        with np.errstate(over="ignore"):
            self.out_data = np.float32(1.0) / (np.float32(1.0) + np.exp(-x))
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.size) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        g = self._take(grads, self.size)
        derivative = self.out_data * (np.float32(1.0) - self.out_data)
        self.input_grads = g * derivative
        return self.input_grads


class Tanh(Layer):
    """Hyperbolic tangent."""

    name = "Tanh"
    trainable = False

    def __init__(self, size: int) -> None:
        super().__init__(size, size)
        self.size = size

    def forward(self, data: ArrayLike) -> np.ndarray:
        self.out_data = np.tanh(self._take(data, self.size))
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.size) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        g = self._take(grads, self.size)
        derivative = np.float32(1.0) - self.out_data * self.out_data
        self.input_grads = g * derivative
        return self.input_grads