import json

import numpy as np
import pytest

from simplednn.activations import LeakyRelu, Relu, Sigmoid, Tanh
from simplednn.dense import FC
from simplednn.network import Net


def test_relu_learn_positive_values():
    net = Net([Relu(5)], 1, 0.01)
    for _ in range(10000):
        net.forward([1.0, 2.0, 3.0, 4.0, 5.0])
        net.backward([1.0, 2.0, 3.0, 4.0, 5.0])
        net.forward([-1.0, -2.0, -3.0, -4.0, -5.0])
        net.backward([0.0, 0.0, 0.0, 0.0, 0.0])

    test_positive = [6.0, 7.0, 8.0, 9.0, 10.0]
    positive = net.forward(test_positive).copy()
    negative = net.forward([-6.0, -7.0, -8.0, -9.0, -10.0])
    for out, expected in zip(positive, test_positive):
        assert abs(out - expected) < 0.1
    for out in negative:
        assert abs(out) < 0.1


def test_sigmoid_learn_binary_classification():
    net = Net([Sigmoid(3)], 1, 0.1)
    for _ in range(10000):
        net.forward([1.0, 2.0, 3.0])
        net.backward([1.0, 1.0, 1.0])
        net.forward([-1.0, -2.0, -3.0])
        net.backward([0.0, 0.0, 0.0])

    positive = net.forward([4.0, 5.0, 6.0]).copy()
    negative = net.forward([-4.0, -5.0, -6.0])
    assert all(out > 0.8 for out in positive)
    assert all(out < 0.2 for out in negative)


def test_tanh_learn_range():
    net = Net([Tanh(3)], 1, 0.01)
    for _ in range(10000):
        net.forward([1.0, 2.0, 3.0])
        net.backward([1.0, 1.0, 1.0])
        net.forward([-1.0, -2.0, -3.0])
        net.backward([-1.0, -1.0, -1.0])

    positive = net.forward([4.0, 5.0, 6.0]).copy()
    negative = net.forward([-4.0, -5.0, -6.0])
    assert all(out > 0.8 for out in positive)
    assert all(out < -0.8 for out in negative)


def test_input_layer_is_inserted():
    net = Net([FC(2, 3), LeakyRelu(3, 0.1)], 1, 0.1)
    assert net.layer_names() == ["Identity", "FC", "LeakyReLU"]
    assert net.layers[0].in_size == 2


def test_forward_returns_last_output():
    net = Net([Relu(3)], 1, 0.1)
    output = net.forward([-1.0, 0.5, 2.0])
    np.testing.assert_array_equal(output, [0.0, 0.5, 2.0])
    assert output is net.layers[-1].out_data


def test_wrong_input_size_raises():
    net = Net([Relu(3)], 1, 0.1)
    with pytest.raises(ValueError):
        net.forward([1.0, 2.0])


def test_empty_layers_raise():
    with pytest.raises(ValueError):
        Net([], 1, 0.1)


def test_zero_batch_size_raises():
    with pytest.raises(ValueError):
        Net([Relu(2)], 0, 0.1)


def test_gradients_applied_once_batch_is_full():
    net = Net([FC(2, 1)], 2, 0.1)
    layer = net.layers[1]
    layer.params()[0][:] = [0.5, -0.5]
    layer.params()[1][:] = [0.0]
    before = layer.weights.copy()

    net.forward([1.0, 1.0])
    net.backward([3.0])
    np.testing.assert_array_equal(layer.weights, before)
    first_grads = layer.weight_grads.copy()
    np.testing.assert_allclose(first_grads, [6.0, 6.0])

    net.forward([1.0, 1.0])
    net.backward([3.0])
    np.testing.assert_allclose(layer.weights, before + first_grads * 0.1, rtol=1e-6)
    np.testing.assert_array_equal(layer.weight_grads, [0.0, 0.0])
    np.testing.assert_array_equal(layer.bias_grads, [0.0])


def test_middle_layers_receive_gradients():
    net = Net([FC(2, 2), Relu(2), FC(2, 1)], 10, 0.1)
    first = net.layers[1]
    net.forward([1.0, -1.0])
    net.backward([5.0])
    relu = net.layers[2]
    last = net.layers[3]
    expected_relu_grads = np.where(first.out_data >= 0, last.input_grads, 0.0)
    np.testing.assert_allclose(relu.input_grads, expected_relu_grads)
    assert np.any(first.weight_grads != 0.0)


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "weights.json"
    source = Net([FC(2, 3), LeakyRelu(3, 0.1), FC(3, 1)], 1, 0.1)
    source.save_weights(path)
    target = Net([FC(2, 3), LeakyRelu(3, 0.1), FC(3, 1)], 1, 0.1)
    target.load_weights(path)

    for a, b in zip(source.layers, target.layers):
        for pa, pb in zip(a.params(), b.params()):
            np.testing.assert_array_equal(pa, pb)
    np.testing.assert_array_equal(
        source.forward([0.3, -0.7]).copy(), target.forward([0.3, -0.7])
    )


def test_saved_file_layout(tmp_path):
    path = tmp_path / "weights.json"
    net = Net([FC(2, 3)], 1, 0.1)
    net.save_weights(path)
    document = json.loads(path.read_text())
    arrays = document["paramsForEachLayer"]
    assert [len(a) for a in arrays] == [0, 6, 3]


def test_load_mismatched_shape_raises(tmp_path):
    path = tmp_path / "weights.json"
    Net([FC(2, 3)], 1, 0.1).save_weights(path)
    other = Net([FC(2, 4)], 1, 0.1)
    before = other.layers[1].weights.copy()
    with pytest.raises(ValueError):
        other.load_weights(path)
    np.testing.assert_array_equal(other.layers[1].weights, before)


def test_load_too_few_arrays_raises(tmp_path):
    path = tmp_path / "weights.json"
    Net([Relu(2)], 1, 0.1).save_weights(path)
    with pytest.raises(ValueError):
        Net([FC(2, 2)], 1, 0.1).load_weights(path)


def test_load_without_key_raises(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"other": []}))
    with pytest.raises(ValueError):
        Net([Relu(2)], 1, 0.1).load_weights(path)