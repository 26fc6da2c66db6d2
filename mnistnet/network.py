"""A small fully connected neural network trained by backpropagation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from .activations import relu, sigmoid, sigmoid_derivative, softmax
from .matrix import add_vector_to_matrix, multiply_matrix

LEARNING_RATE = 0.01


class Activation(str, Enum):
    """Activation applied to a layer's weighted sum."""

    SIGMOID = "sigmoid"
    SOFTMAX = "softmax"
    RELU = "relu"
    LINEAR = "linear"


@dataclass
class Layer:
    """One dense layer: weights, a single-row bias and an activation.

    ``inputs``, ``z`` and ``output`` hold the values of the last forward pass.
    """

    weights: np.ndarray
    bias: np.ndarray
    activation: Activation = Activation.LINEAR
    inputs: np.ndarray | None = None
    z: np.ndarray | None = None
    output: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.weights = np.asarray(self.weights, dtype=np.float64)
        self.bias = np.asarray(self.bias, dtype=np.float64)
        self.activation = Activation(self.activation)

    def forward(self, inputs: ArrayLike) -> np.ndarray:
        """Compute and remember this layer's output for ``inputs``."""
        values = np.asarray(inputs, dtype=np.float64)
        self.inputs = values

        if values.shape[1] == self.weights.shape[0]:
            z = multiply_matrix(values, self.weights)
        else:
            z = multiply_matrix(values, self.weights.T)

        if z.shape == self.bias.shape:
            z = z + self.bias
        else:
            z = add_vector_to_matrix(z.T, self.bias)
        self.z = z

        if self.activation is Activation.SIGMOID:
            self.output = sigmoid(z)
        elif self.activation is Activation.SOFTMAX:
            self.output = softmax(z)
        elif self.activation is Activation.RELU:
            self.output = relu(z)
        else:
            self.output = z.copy()
        return self.output


@dataclass
class Network:
    """A stack of layers evaluated in order."""

    layers: list[Layer] = field(default_factory=list)

    def forward(self, inputs: ArrayLike) -> np.ndarray:
        """Run ``inputs`` through every layer and return the last output."""
        output = np.asarray(inputs, dtype=np.float64)
        for layer in self.layers:
            output = layer.forward(output)
        return output

    def backpropagate(
        self, true_output: ArrayLike, learning_rate: float = LEARNING_RATE
    ) -> None:
        """Adjust weights and biases towards ``true_output``.

        Uses the values kept from the last call of :meth:`forward`. Layers
        with a relu or linear activation are left unchanged.
        """
        target = np.asarray(true_output, dtype=np.float64)
        if any(layer.output is None or layer.inputs is None for layer in self.layers):
            raise RuntimeError("forward must run before backpropagation")

        last = len(self.layers) - 1
        delta: np.ndarray | None = None

        for index, layer in reversed(list(enumerate(self.layers))):
            if layer.activation is Activation.SOFTMAX:
                delta = self.layers[-1].output - target
                adjustment = -learning_rate * multiply_matrix(layer.inputs.T, delta)
                bias_step = -learning_rate * delta
                layer.weights = layer.weights + adjustment
                # A bias whose row count differs from the batch is not updated.
                if layer.bias.shape[0] == bias_step.shape[0]:
                    layer.bias = bias_step + layer.bias

            elif layer.activation is Activation.SIGMOID:
                derivative = sigmoid_derivative(layer.output)
                if index == last:
                    delta = layer.output - target
                else:
                    if delta is None:
                        raise ValueError("no error signal from the following layer")
                    delta = multiply_matrix(delta, self.layers[index + 1].weights.T)
                delta = delta * derivative
                adjustment = -learning_rate * multiply_matrix(layer.inputs.T, delta)
                layer.weights = layer.weights + adjustment
                # The bias takes the weight adjustment, and only when the row
                # counts agree; otherwise it keeps its value.
                if layer.bias.shape[0] == adjustment.shape[0]:
                    layer.bias = adjustment + layer.bias


def get_network_answer(output: ArrayLike) -> int:
    """Index of the largest value in a single-row output matrix."""
    values = np.asarray(output, dtype=np.float64)
    if values.ndim != 2 or values.shape[0] != 1:
        raise ValueError("output matrix must have exactly 1 row to get answer")
    return int(np.argmax(values[0]))