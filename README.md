# simplednn

A small library for building neural networks out of modular layers and
training them with plain gradient descent. It is built on numpy; all data,
parameters and gradients are flat `float32` arrays.

A network is a list of layers. Each layer knows how to push data forward and
how to push gradients backward; the network chains them together, collects
the gradients over a batch and applies them to the trainable parameters.

## Layers

| Layer       | Module                  | Trainable | Constructor                                               |
|-------------|-------------------------|-----------|-----------------------------------------------------------|
| `FC`        | `simplednn.dense`       | yes       | `FC(in_size, out_size)`                                   |
| `Conv2D`    | `simplednn.conv2d`      | yes       | `Conv2D(input_dims, filter_dims, output_channels, stride)` |
| `Relu`      | `simplednn.activations` | no        | `Relu(size)`                                              |
| `LeakyRelu` | `simplednn.activations` | no        | `LeakyRelu(size, alpha)`                                  |
| `Sigmoid`   | `simplednn.activations` | no        | `Sigmoid(size)`                                           |
| `Tanh`      | `simplednn.activations` | no        | `Tanh(size)`                                              |
| `Identity`  | `simplednn.identity`    | no        | `Identity(size)`, passes data and gradients through       |

All layers share the interface of `simplednn.layer.Layer`:

- `forward(data)` runs the layer and returns its output, also kept in
  `out_data`.
- `backward_target(data_in, expected)` and `backward_grads(data_in, grads)`
  compute the gradients of the layer's input, returned and kept in
  `input_grads`. `data_in` is the input the layer was given; trainable layers
  add to their accumulated gradients.
- `params()`, `grads()` and `param_grad_pairs()` return the parameter arrays
  and their gradient arrays. Changing a returned array in place changes the
  layer. Layers without parameters return a single empty array.
- `name`, `trainable`, `in_size` and `out_size` describe the layer.

`FC` keeps its parameters in `weights` and `bias`, with the weight from input
`j` to output `i` at index `i + j * out_size`. Both start uniform in [-1, 1).

For `Conv2D`, `input_dims` is `(width, height, channels)` and `filter_dims`
is `(width, height)`. Data is laid out channel by channel, each channel row by
row; filter weights (`filter_weights`) filter by filter, then channel, then
row. There is one bias per output value (`biases`). Each output side is
`ceil((input - filter + 1) / stride)`. A stride below 1, a filter larger than
the input, or a dimension below 1 raises `ValueError`.

## Training a network

```python
from simplednn.network import Net
from simplednn.dense import FC
from simplednn.activations import LeakyRelu

net = Net(
    [
        FC(2, 3),
        LeakyRelu(3, 0.1),
        FC(3, 3),
        LeakyRelu(3, 0.1),
        FC(3, 1),
        LeakyRelu(1, 0.1),
    ],
    1,    # batch size
    0.1,  # learning rate
)

samples = [
    ([1.0, 0.0], [1.0]),
    ([1.0, 1.0], [0.0]),
    ([0.0, 1.0], [1.0]),
    ([0.0, 0.0], [0.0]),
]

for _ in range(1500):
    for inputs, target in samples:
        net.forward(inputs)
        net.backward(target)

print(net.forward([1.0, 0.0]))  # close to 1
print(net.forward([0.0, 0.0]))  # close to 0
```

`Net` places an `Identity` layer in front of the layers you give it, so the
first layer's input is kept for training; `net.layers` holds every layer and
`net.layer_names()` lists their names, that input layer first. The input to
`forward` must have exactly the first layer's input size, or `ValueError` is
raised. An empty list of layers or a batch size below 1 also raises
`ValueError`.

Each call to `backward(expected)` backpropagates from the target output and
accumulates gradients. Every `batch_size` calls, each trainable parameter is
moved by its gradient divided by the batch size and scaled by the learning
rate, and the gradients are reset to zero.

## Saving and loading weights

```python
net.save_weights("network_weights.json")

other = Net([...same layers...], 1, 0.1)
other.load_weights("network_weights.json")
```

The file is JSON holding every parameter array of every layer, in layer
order. `load_weights` raises `ValueError` when the file holds too few arrays
or an array of the wrong size, and changes nothing in that case.

## Demo

The package ships a small demo that trains the network above on XOR and
prints its output for `[1, 0]` and `[0, 0]`:

```
simplednn-demo
simplednn-demo --epochs 3000
simplednn-demo --save network_weights.json
```

`--epochs` sets how many times every XOR sample is shown (default 1500).
`--save PATH` also writes the trained weights to `PATH`, loads them into a
fresh network and prints that network's output.

The same pieces are available from Python as
`simplednn.demo.build_xor_net()` and `simplednn.demo.train_xor(net, epochs)`.

## What it does not do

Only weights are saved, not the layout of the network: to load a file you
must build a network with the same layers yourself. Training is plain
gradient descent on the difference between the target and the output; there
are no other optimizers or loss functions.

## Running the tests

```
pip install .[test]
pytest
```