"""Training of a digit classifier on MNIST data, with console progress."""

from __future__ import annotations

import argparse
import sys
import time
from typing import TextIO

import numpy as np

from .activations import cross_entropy
from .console import clear_console
from .data import bytes_to_floats, labels_to_outputs
from .matrix import random_dense
from .mnist import IMAGE_SIZE_BYTES, MNISTData, read_data, render_image
from .network import LEARNING_RATE, Activation, Layer, Network, get_network_answer

INPUTS = 784
HIDDEN_NEURONS = 50
HIDDEN_LAYERS = 1
OUTPUTS = 10
EPOCHS = 1
PRINT_OUTPUT_EVERY = 250

DEFAULT_IMAGES = "./data/train-images.idx3-ubyte"
DEFAULT_LABELS = "./data/train-labels.idx1-ubyte"


def build_network(
    inputs: int = INPUTS,
    hidden_neurons: int = HIDDEN_NEURONS,
    hidden_layers: int = HIDDEN_LAYERS,
    outputs: int = OUTPUTS,
    rng: np.random.Generator | None = None,
) -> Network:
    """Sigmoid hidden layers and a softmax output layer, weights in [-1, 1)."""
    layers = []
    for index in range(hidden_layers):
        rows = inputs if index == 0 else hidden_neurons
        layers.append(
            Layer(
                weights=random_dense(rows, hidden_neurons, -1.0, 1.0, rng),
                bias=np.zeros((1, hidden_neurons)),
                activation=Activation.SIGMOID,
                output=np.zeros((1, hidden_neurons)),
            )
        )
    layers.append(
        Layer(
            weights=random_dense(hidden_neurons, outputs, -1.0, 1.0, rng),
            bias=np.zeros((1, outputs)),
            activation=Activation.SOFTMAX,
            output=np.zeros((1, outputs)),
        )
    )
    return Network(layers)


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def train(
    network: Network,
    data: MNISTData,
    epochs: int = EPOCHS,
    learning_rate: float = LEARNING_RATE,
    report_every: int = PRINT_OUTPUT_EVERY,
    out: TextIO | None = None,
) -> tuple[int, int]:
    """Train ``network`` one image at a time and report progress to ``out``.

    Returns the number of right answers and the number of tries.
    """
    out = sys.stdout if out is None else out
    if report_every <= 0:
        raise ValueError("report_every must be positive")
    count = data.images_number
    if len(data.labels) < count:
        raise ValueError("fewer labels than images")

    outputs = network.layers[-1].bias.shape[1]
    pixels = bytes_to_floats(data.pixels)[: count * IMAGE_SIZE_BYTES]
    images = pixels.reshape(count, IMAGE_SIZE_BYTES)
    targets = labels_to_outputs(data.labels, outputs)

    tries = right_answers = 0
    for epoch in range(epochs):
        for i, (image, target, label) in enumerate(zip(images, targets, data.labels)):
            train_input = image.reshape(1, -1)
            train_output = target.reshape(1, -1)
            output = network.forward(train_input)

            try:
                answer = get_network_answer(output)
            except ValueError as error:
                print(error, file=out)
                continue

            tries += 1
            if label == answer:
                right_answers += 1

            if i % report_every == 0:
                with np.errstate(divide="ignore", invalid="ignore"):
                    error_value = cross_entropy(train_output, output)
                accuracy = right_answers / tries * 100.0
                if _is_terminal(out):
                    clear_console()
                out.write(render_image(train_input))
                out.write(f"EPOCH: {epoch + 1}\n")
                out.write(f"IMAGE OUT - NETWORK OUT : {label} - {answer}\n")
                out.write(f"ERROR: {error_value:.4f}%\n")
                out.write(
                    f"RIGHT ANSWERS: {accuracy:.4f}% [ {right_answers} / {tries} ]\n"
                )

            network.backpropagate(train_output, learning_rate)

    return right_answers, tries


def main(argv: list[str] | None = None) -> int:
    """Train a fresh network on MNIST files and print progress."""
    parser = argparse.ArgumentParser(
        prog="mnistnet", description="Train a digit classifier on MNIST data."
    )
    parser.add_argument("--images", default=DEFAULT_IMAGES, help="IDX image file")
    parser.add_argument("--labels", default=DEFAULT_LABELS, help="IDX label file")
    parser.add_argument("--epochs", type=int, default=EPOCHS)
    parser.add_argument("--learning-rate", type=float, default=LEARNING_RATE)
    parser.add_argument("--report-every", type=int, default=PRINT_OUTPUT_EVERY)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        data = read_data(args.images, args.labels)
    except (OSError, EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    rng = np.random.default_rng(args.seed)
    network = build_network(INPUTS, HIDDEN_NEURONS, HIDDEN_LAYERS, OUTPUTS, rng)

    start = time.perf_counter()
    train(network, data, args.epochs, args.learning_rate, args.report_every)
    elapsed = time.perf_counter() - start
    print(f"Time elapsed: {elapsed:.6f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())