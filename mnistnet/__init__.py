"""A small fully connected neural network trained on MNIST digits, with IDX readers."""

__version__ = "0.1.0"