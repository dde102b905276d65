# mlplus

Small machine-learning building blocks on top of numpy.

## Modules

- `mlplus.cost` — costs and their derivatives for vectors or matrices:
  `mse` (half mean squared error), `rmse`, `mae`, `mbe`, `log_loss`,
  `cross_entropy`, `huber_loss`, `hinge_loss`, `regularized_hinge_loss`,
  `wasserstein_loss`, each with a matching `*_deriv` function, and the
  linear-kernel dual SVM objective `dual_form_svm` / `dual_form_svm_deriv`.
  Regularisation helpers `reg_term`, `reg_deriv_term` and `reg_weights`
  handle `"Ridge"`, `"Lasso"`, `"ElasticNet"` and `"WeightClipping"`; any
  other type name contributes nothing.
- `mlplus.data` — CSV readers `read_supervised`, `read_unsupervised`,
  `read_simple` and `read_input_names`; column printers `print_supervised`,
  `print_unsupervised` and `print_simple` (to stdout or a given `file`);
  dataset loaders (`load_breast_cancer`, `load_breast_cancer_svc`,
  `load_iris`, `load_wine`, `load_mnist_train`, `load_mnist_test`,
  `load_california_housing`, `load_fires_and_crime`) that each take the path
  of a CSV file; `train_test_split`; channel-first colour conversions
  `rgb2gray`, `rgb2ycbcr`, `rgb2hsv`, `rgb2xyz`, `xyz2rgb`; and
  `feature_scaling`, `mean_centering`, `mean_normalization`, `one_hot`,
  `reverse_one_hot`.
- `mlplus.text` — `to_lower`, `split`, `split_sentences`, `segment`,
  `tokenize`, `remove_spaces`, `remove_null_byte`, `remove_stop_words`,
  `stemming`, `unique`, `create_word_list`, `bag_of_words`, `tfidf` and
  `lsa`.
- Models:
  - `DualSVC` (`mlplus.dual_svc`) — binary classifier with labels -1/+1,
    trained by projected gradient descent on the dual problem; only the
    `"Linear"` kernel is accepted.
  - `ExpReg` (`mlplus.exp_reg`) — exponential regression
    `sum(initial * weights ** x) + bias`, with `gradient_descent`, `sgd` and
    `mbgd`.
  - `KMeans` (`mlplus.kmeans`) — `"Default"` (random) or `"KMeans++"`
    initialisation, `train`, `score` and `silhouette_scores`.
  - `GaussianNB` (`mlplus.gaussian_nb`) — naive Bayes with one Gaussian per
    class.
- `mlplus.gauss_markov` — `arithmetic_mean`, `homoscedasticity`,
  `exogeneity` and `check_gm_conditions`, which prints a report and returns
  whether all three conditions hold.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Costs:

```python
from mlplus.cost import mse, hinge_loss, reg_term

mse([1.0, 3.0], [1.0, 2.0])                     # 0.25
hinge_loss([0.5, -0.1], [1.0, -1.0])            # 0.7
reg_term([1.0, 2.0, -3.0], 0.5, 0.0, "Ridge")   # 3.5
```

Data preparation:

```python
from mlplus.data import one_hot, reverse_one_hot

one_hot([0, 2, 1], 3)         # [[1., 0., 0.], [0., 0., 1.], [0., 1., 0.]]
reverse_one_hot([[0, 1, 0]])  # [2.]  (classes are counted from 1)
```

Text features:

```python
from mlplus.text import bag_of_words, tfidf

sentences = ["The cat sat on the mat.", "The dog ate the cat."]
counts = bag_of_words(sentences, "Default")
weights = tfidf(sentences)
```

Models:

```python
import random
from mlplus.kmeans import KMeans

points = [[0.0, 0.0], [0.1, 0.0], [5.0, 5.0], [5.1, 5.0]]
model = KMeans(points, 2, "KMeans++", random.Random(0))
model.train(10, False)
model.score()  # within-cluster sum of squared distances
```

`DualSVC`, `ExpReg`, `KMeans` and `train_test_split` take an optional
`random.Random` so that runs can be reproduced. Training methods take a `ui`
flag; when true, the cost and parameters are printed after every epoch.

## What the package does not do

- It has no command-line interface; everything is used from Python.
- It ships no datasets: the loaders read CSV files whose paths you supply.
- Models cannot be saved to or loaded from files.
- `DualSVC` has no stochastic or mini-batch training and no non-linear
  kernels.
- There is no word-embedding training; `lsa` is the only embedding method.