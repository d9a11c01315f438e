"""A feed-forward network made of a list of layers."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from itertools import pairwise

import numpy as np
from numpy.typing import ArrayLike

from .identity import Identity
from .layer import Layer

_WEIGHTS_KEY = "paramsForEachLayer"


class Net:
    """Runs data through its layers and trains them from target outputs.

    An :class:`Identity` layer is put in front of the given layers so that
    the input of the first real layer is kept for training. Gradients are
    summed over ``batch_size`` calls to :meth:`backward` and then applied.
    """

    def __init__(
        self, layers: Iterable[Layer], batch_size: int, learning_rate: float
    ) -> None:
        layers = list(layers)
        if not layers:
            raise ValueError("a network needs at least one layer")
        if batch_size < 1:
            raise ValueError("batch size must be at least 1")
        self.layers: list[Layer] = [Identity(layers[0].in_size), *layers]
        self.batch_size = batch_size
        self.learning_rate = np.float32(learning_rate)
        self.training_iterations = 0

    def layer_names(self) -> list[str]:
        """The name of each layer, the input layer first."""
        return [layer.name for layer in self.layers]

    def forward(self, data: ArrayLike) -> np.ndarray:
        """Run ``data`` through every layer and return the last layer's output."""
        self.layers[0].forward(data)
        for previous, layer in pairwise(self.layers):
            layer.forward(previous.out_data)
        return self.layers[-1].out_data

    def backward(self, expected: ArrayLike) -> None:
        """Backpropagate towards ``expected``; apply gradients once a batch is full."""
        self.layers[-1].backward_target(self.layers[-2].out_data, expected)
        triples = list(zip(self.layers, self.layers[1:], self.layers[2:]))
        for previous, layer, following in reversed(triples):
            layer.backward_grads(previous.out_data, following.input_grads)

        self.training_iterations += 1
        if self.training_iterations % self.batch_size:
            return
        batch = np.float32(self.batch_size)
        for layer in self.layers:
            if not layer.trainable:
                continue
            for params, grads in layer.param_grad_pairs():
                params += (grads / batch) * self.learning_rate
                grads.fill(0.0)

    def save_weights(self, path: str | os.PathLike[str]) -> None:
        """Write every parameter array of every layer to a JSON file."""
        arrays = [
            [float(str(value)) for value in params]
            for layer in self.layers
            for params in layer.params()
        ]
        with open(path, "w", encoding="utf-8") as handle:
            json.dump({_WEIGHTS_KEY: arrays}, handle)

    def load_weights(self, path: str | os.PathLike[str]) -> None:
        """Read parameters written by :meth:`save_weights` into this network.

        Raises ValueError when the file does not match the network's shape.
        """
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
        try:
            saved = document[_WEIGHTS_KEY]
        except (KeyError, TypeError) as error:
            raise ValueError(f"no {_WEIGHTS_KEY!r} list in {path}") from error

        targets = [params for layer in self.layers for params in layer.params()]
        if len(saved) < len(targets):
            raise ValueError(
                f"the file holds {len(saved)} parameter arrays, "
                f"the network needs {len(targets)}"
            )
        values = [np.asarray(entry, dtype=np.float32) for entry in saved[: len(targets)]]
        for params, loaded in zip(targets, values):
            if loaded.shape != params.shape:
                raise ValueError(
                    f"parameter array of size {params.size} "
                    f"cannot take {loaded.size} saved values"
                )
        for params, loaded in zip(targets, values):
            params[:] = loaded