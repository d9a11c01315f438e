"""A layer that passes data and gradients through unchanged."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .layer import Layer


class Identity(Layer):
    """Copies its input to its output.

    The network puts one in front of every model so that the first real
    layer's input is kept somewhere for training.
    """

    name = "Identity"
    trainable = False

    def __init__(self, size: int) -> None:
        super().__init__(size, size)
        self.size = size

    def forward(self, data: ArrayLike) -> np.ndarray:
        array = np.asarray(data, dtype=np.float32).reshape(-1)
        if len(array) != self.size:
            raise ValueError(
                f"Input size is wrong! Model expected size of: {self.size}, "
                f"but you inputted a size of: {len(array)}"
            )
        self.out_data = array.copy()
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        self.input_grads = self._take(expected, self.size) - self.out_data
        return self.input_grads

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        self.input_grads = self._take(grads, self.size, exact=True).copy()
        return self.input_grads