# mnistnet

A small fully connected neural network that learns to recognise the
handwritten digits of the MNIST data set. Hidden layers use a sigmoid
activation and the output layer uses softmax. Training is online. Each image
goes forward through the network. Its error is then propagated back, and the
weights and biases are adjusted straight away.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Training from the command line

By default the command reads the MNIST training files from a `data`
directory below the current one:

```
data/train-images.idx3-ubyte
data/train-labels.idx1-ubyte
```

Then run:

```
mnistnet-train
```

`python -m mnistnet.train` does the same.

The command builds a network with 784 inputs, one hidden layer of 50 sigmoid
neurons and 10 softmax outputs. The weights start uniformly random in
[-1, 1) and the biases start at zero.

| Option | Default | Meaning |
| --- | --- | --- |
| `--images PATH` | `./data/train-images.idx3-ubyte` | IDX image file |
| `--labels PATH` | `./data/train-labels.idx1-ubyte` | IDX label file |
| `--epochs N` | `1` | passes over the data |
| `--learning-rate R` | `0.01` | step size of each update |
| `--report-every N` | `250` | report on every N-th image of an epoch |
| `--seed N` | none | seed for the random weights |

Each report shows the following:

- the current image, drawn in block characters;
- the epoch;
- the true label next to the network's answer;
- the cross-entropy error for that image;
- the share of right answers so far.

The console is cleared before each report when standard output is a
terminal. When training ends, the elapsed time is printed. If the data files
cannot be read, an error goes to standard error and the command exits with
status 1.

## Using it from Python

```python
import sys

import numpy as np

from mnistnet.mnist import read_data
from mnistnet.train import build_network, train

data = read_data("data/train-images.idx3-ubyte", "data/train-labels.idx1-ubyte")

network = build_network(
    inputs=784,
    hidden_neurons=50,
    hidden_layers=1,
    outputs=10,
    rng=np.random.default_rng(0),
)

right, tries = train(
    network, data, epochs=1, learning_rate=0.01, report_every=250, out=sys.stdout
)
print(f"{right} of {tries} right")
```

`train` returns the number of right answers and the number of tries.

The building blocks can also be used on their own:

- `mnistnet.activations` provides `softmax`, `sigmoid`, `relu`,
  `sigmoid_derivative`, `relu_derivative` and `cross_entropy`.
- `mnistnet.matrix` provides `rand_float`, `random_dense`,
  `add_vector_to_matrix` and `multiply_matrix`. The last two raise
  `ValueError` when the shapes do not fit.
- `mnistnet.data` provides the following:
  - `bytes_to_floats`;
  - `labels_to_outputs`, which turns digit labels into one-hot rows. A label
    outside the range gives a row of zeros.
- `mnistnet.mnist` provides the following:
  - `read_images`, `read_labels` and `read_data` for the IDX file format;
  - the `MNISTData` dataclass;
  - `render_image` and `print_image`, which draw a 28×28 image as text.
- `mnistnet.network` provides the following:
  - `Activation`, which is sigmoid, softmax, relu or linear;
  - `Layer`;
  - `Network`, with `forward` and `backpropagate`;
  - `get_network_answer`, which returns the index of the highest output.
- `mnistnet.console` provides `clear_console`.

## What it does not do

- `Network.backpropagate` updates only sigmoid and softmax layers. Relu and
  linear layers take part in `forward` but are never adjusted.
- The package has no way to save or load a trained network.
- The package has no separate evaluation on a test set. The accuracy it
  reports is the running share of right answers during training.