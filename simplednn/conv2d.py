"""Two-dimensional convolution layer."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike

from .layer import Layer

_rng = np.random.default_rng()


class Conv2D(Layer):
    """Slides ``output_channels`` filters over a multi-channel image.

    Data is flat and laid out channel by channel, each channel row by row.
    Filter weights are laid out filter by filter, then channel, then row.
    There is one bias per output value. The output side is
    ``ceil((input - filter + 1) / stride)``.
    """

    name = "Conv2D"
    trainable = True

    def __init__(
        self,
        input_dims: tuple[int, int, int],
        filter_dims: tuple[int, int],
        output_channels: int,
        stride: int,
    ) -> None:
        input_width, input_height, input_channels = input_dims
        filter_width, filter_height = filter_dims
        if stride < 1:
            raise ValueError("stride must be at least 1")
        if filter_width > input_width or filter_height > input_height:
            raise ValueError("the filter is larger than the input")
        if min(input_channels, output_channels, filter_width, filter_height) < 1:
            raise ValueError("dimensions must be at least 1")

        output_height = -(-(input_height - filter_height + 1) // stride)
        output_width = -(-(input_width - filter_width + 1) // stride)

        super().__init__(
            input_channels * input_height * input_width,
            output_channels * output_height * output_width,
        )
        self.input_width = input_width
        self.input_height = input_height
        self.input_channels = input_channels
        self.filter_width = filter_width
        self.filter_height = filter_height
        self.output_channels = output_channels
        self.output_height = output_height
        self.output_width = output_width
        self.stride = stride

        filters_size = output_channels * input_channels * filter_width * filter_height
        self.filter_weights = (
            _rng.uniform(-1.0, 1.0, filters_size).astype(np.float32)
            / np.float32(input_channels)
        )
        self.filter_grads = np.zeros(filters_size, dtype=np.float32)
        self.biases = (
            np.float32(0.1) * _rng.uniform(-1.0, 1.0, self.out_size).astype(np.float32)
        )
        self.bias_grads = np.zeros(self.out_size, dtype=np.float32)

    def _image(self, data: ArrayLike) -> np.ndarray:
        return self._take(data, self.in_size, exact=True).reshape(
            self.input_channels, self.input_height, self.input_width
        )

    def _patches(self, image: np.ndarray) -> np.ndarray:
        """Every filter-sized window the stride visits: (channel, y, x, fh, fw)."""
        windows = sliding_window_view(
            image, (self.filter_height, self.filter_width), axis=(1, 2)
        )
        return windows[:, :: self.stride, :: self.stride]

    def _filters(self) -> np.ndarray:
        return self.filter_weights.reshape(
            self.output_channels,
            self.input_channels,
            self.filter_height,
            self.filter_width,
        )

    def forward(self, data: ArrayLike) -> np.ndarray:
        patches = self._patches(self._image(data))
        sums = np.einsum("cyxhw,fchw->fyx", patches, self._filters())
        self.out_data = (self.biases + sums.reshape(-1)).astype(np.float32)
        return self.out_data

    def backward_target(self, data_in: ArrayLike, expected: ArrayLike) -> np.ndarray:
        error = self._take(expected, self.out_size, exact=True) - self.out_data
        return self.backward_grads(data_in, error)

    def backward_grads(self, data_in: ArrayLike, grads: ArrayLike) -> np.ndarray:
        patches = self._patches(self._image(data_in))
        g = self._take(grads, self.out_size, exact=True).reshape(
            self.output_channels, self.output_height, self.output_width
        )
        self.bias_grads += g.reshape(-1)
        self.filter_grads += np.einsum("cyxhw,fyx->fchw", patches, g).reshape(-1)

        contributions = np.einsum("fchw,fyx->cyxhw", self._filters(), g)
        input_grads = np.zeros(
            (self.input_channels, self.input_height, self.input_width), dtype=np.float32
        )
        s = self.stride
        row_span = s * (self.output_height - 1) + 1
        col_span = s * (self.output_width - 1) + 1
        for fy in range(self.filter_height):
            for fx in range(self.filter_width):
                input_grads[:, fy : fy + row_span : s, fx : fx + col_span : s] += (
                    contributions[:, :, :, fy, fx]
                )
        self.input_grads = input_grads.reshape(-1)
        return self.input_grads

    def params(self) -> list[np.ndarray]:
        return [self.filter_weights, self.biases]

    def grads(self) -> list[np.ndarray]:
        return [self.filter_grads, self.bias_grads]

    def param_grad_pairs(self) -> list[tuple[np.ndarray, np.ndarray]]:
        return [(self.filter_weights, self.filter_grads), (self.biases, self.bias_grads)]