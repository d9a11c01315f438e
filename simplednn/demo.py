"""Trains a small network on XOR and optionally saves and reloads it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .activations import LeakyRelu
from .dense import FC
from .network import Net

XOR_SAMPLES = (
    ([1.0, 0.0], [1.0]),
    ([1.0, 1.0], [0.0]),
    ([0.0, 1.0], [1.0]),
    ([0.0, 0.0], [0.0]),
)


def build_xor_net() -> Net:
    """A 2-3-3-1 network with leaky ReLU activations."""
    return Net(
        [
            FC(2, 3),
            LeakyRelu(3, 0.1),
            FC(3, 3),
            LeakyRelu(3, 0.1),
            FC(3, 1),
            LeakyRelu(1, 0.1),
        ],
        1,
        0.1,
    )


def train_xor(net: Net, epochs: int) -> None:
    """Show ``net`` each XOR sample once per epoch."""
    for _ in range(epochs):
        for inputs, target in XOR_SAMPLES:
            net.forward(inputs)
            net.backward(target)


def _report(net: Net, title: str) -> None:
    print(title)
    print(net.forward([1.0, 0.0]).tolist())
    print(net.forward([0.0, 0.0]).tolist())


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train a small network on XOR.")
    parser.add_argument("--epochs", type=_non_negative, default=1500)
    parser.add_argument(
        "--save", metavar="PATH", help="save the weights here and reload them"
    )
    args = parser.parse_args(argv)

    net = build_xor_net()
    train_xor(net, args.epochs)
    _report(net, "Output from network (should be 1, 0):")

    if args.save:
        net.save_weights(args.save)
        loaded = build_xor_net()
        loaded.load_weights(args.save)
        _report(loaded, "Output from loaded network (should be 1, 0):")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())