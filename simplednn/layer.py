"""The interface shared by every layer of a network."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike


class Layer(ABC):
    """One layer of a network.

    A layer does not keep its input. The input of a layer is the ``out_data``
    of the layer before it, so the network passes it back in as ``data_in``
    when it runs the layer backwards.

    Parameters and gradients are flat float32 arrays. ``params`` and ``grads``
    return lists of them because some layers have more than one set, such as
    weights and biases. A layer without parameters returns one empty array.
    """

    name = "Layer"
    trainable = False

    def __init__(self, in_size: int, out_size: int) -> None:
        self.in_size = in_size
        self.out_size = out_size
        self.out_data = np.zeros(out_size, dtype=np.float32)
        self.input_grads = np.zeros(in_size, dtype=np.float32)
        self._no_params = np.zeros(0, dtype=np.float32)
        self._no_grads = np.zeros(0, dtype=np.float32)

    @abstractmethod
    def forward(self, data: ArrayLike) -> np.ndarray:
        """Run the layer on ``data`` and return its output."""

    @abstractmethod
    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        """Compute the input gradients from the output the layer should have given."""

    @abstractmethod
    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        """Compute the input gradients from the gradients of the layer's output."""

    def params(self) -> list[np.ndarray]:
        """The layer's parameter arrays; changing them in place changes the layer."""
        return [self._no_params]

    def grads(self) -> list[np.ndarray]:
        """The accumulated gradient array for each parameter array."""
        return [self._no_grads]

    def param_grad_pairs(self) -> list[tuple[np.ndarray, np.ndarray]]:
        """Each parameter array together with its gradient array."""
        return list(zip(self.params(), self.grads()))

    @staticmethod
    def _take(values: ArrayLike, size: int, *, exact: bool = False) -> np.ndarray:
        """The first ``size`` entries of ``values`` as float32.

        Raises ValueError when there are fewer entries, or, with ``exact``,
        when the count differs at all.
        """
        array = np.asarray(values, dtype=np.float32).reshape(-1)
        if len(array) < size or (exact and len(array) != size):
            raise ValueError(f"expected {size} values, got {len(array)}")
        return array[:size]