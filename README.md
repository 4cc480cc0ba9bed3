# spamnet

A small neural network toolkit in plain Python, together with a loader that
turns a CSV file of labelled messages into bag-of-words vectors for spam
classification. No third-party libraries are needed.

## Contents

- `spamnet.tensor`: `Tensor`, an n-dimensional array stored in row-major
  order. It supports indexing with `t[i, j]`, `+`, `-` and `*` between
  tensors (with broadcasting over dimensions of size 1) and with numbers,
  division by a number, `fill`, `assign`, `reshape`, `map` and `broadcast`.
  The module also has the functions `transpose_2d`, `matrix_product` and
  `apply`.
- `spamnet.interfaces`: the abstract base classes `Layer`, `Optimizer` and
  `Loss`.
- `spamnet.dense`: `Dense`, a fully connected layer computing `x @ W + b`.
  Its `weights` have shape `(in, out)` and its `bias` has shape `(1, out)`.
- `spamnet.activation`: `ReLU` and `Sigmoid` layers.
- `spamnet.loss`: `MSELoss` and `BCELoss`. `BCELoss` clamps predictions to
  the range `[1e-7, 1 - 1e-7]`.
- `spamnet.optimizer`: `SGD` (default learning rate 0.01) and `Adam`
  (defaults 0.001, 0.9, 0.999, 1e-8). `Adam` advances its time step on every
  `update` call and on every `step` call.
- `spamnet.network`: `NeuralNetwork`, which chains layers and trains them on
  mini-batches.
- `spamnet.text_loader`: `TextLoader` and `TextExample`.
- `spamnet.cli`: the `spamnet` command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Loading a message dataset

The loader expects a UTF-8 CSV file. Its first line is a header and every
other line has the form `label,message`. The label ends at the first comma
and the rest of the line is the message. A label of exactly `spam` becomes
`1`, and any other label becomes `0`.

```python
from spamnet.text_loader import TextLoader

loader = TextLoader("messages.csv")
loader.load_data()

print(len(loader.dataset), "examples")
print(loader.vocabulary_size, "distinct words")

first = loader.dataset[0]
print(first.label, first.vectorized_text)
```

`TextLoader.tokenize` splits text on whitespace, removes ASCII punctuation
and lower-cases ASCII letters. A word made only of punctuation gives an
empty token.

The vocabulary holds every distinct token in the file, in order of first
appearance, and `vocabulary_list` returns it in that order. Each message
becomes a list of word counts over the vocabulary. `loader.vectorize(text)`
applies the same mapping to new text and ignores words it has not seen.

`load_data` raises `OSError` (for example `FileNotFoundError`) when the
file cannot be opened.

## Building and training a network

```python
import random

from spamnet.activation import ReLU, Sigmoid
from spamnet.dense import Dense
from spamnet.loss import BCELoss
from spamnet.network import NeuralNetwork
from spamnet.optimizer import Adam
from spamnet.tensor import Tensor


def random_weights(t):
    t.assign([random.uniform(-0.5, 0.5) for _ in range(t.size)])


def zeros(t):
    t.fill(0.0)


net = NeuralNetwork()
net.add_layer(Dense(2, 4, random_weights, zeros))
net.add_layer(ReLU())
net.add_layer(Dense(4, 1, random_weights, zeros))
net.add_layer(Sigmoid())

x = Tensor(4, 2, data=[0, 0, 0, 1, 1, 0, 1, 1])
y = Tensor(4, 1, data=[0, 1, 1, 0])

net.train(x, y, 2000, 4, 0.01, BCELoss, Adam)
print(net.predict(x))
```

`train(x, y, epochs, batch_size, learning_rate, loss, optimizer=SGD)`
takes the loss class and the optimizer class. It creates one optimizer with
the learning rate and splits the rows, in order, into batches of at most
`batch_size` rows. For each batch it:

1. runs a forward pass,
2. back-propagates the loss gradient,
3. updates every layer,
4. calls the optimizer's `step`.

`backward(gradients)` returns the gradient with respect to the network's
input. `optimize(learning_rate)` applies one plain SGD update using the
gradients from the last `backward` call.

## Command line

```
spamnet messages.csv
```

The command loads the file and prints, in Spanish:

- the number of examples loaded,
- the size of the vocabulary,
- the vocabulary words that occur in the first message.

Without an argument it reads `training_words_esp.csv` from the current
directory. It exits with status 1 if the file cannot be opened or holds no
examples.

## What it does not do

The command only reports on a dataset. It does not train or run a
classifier. The package has no ready-made spam model, and it has no way to
save or load trained weights. Networks are built and trained from Python
code as shown above.