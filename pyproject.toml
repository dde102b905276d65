[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlplus"
version = "0.1.0"
description = "Cost functions, data preparation, text features and classic machine-learning models built on numpy"
requires-python = ">=3.10"
keywords = [
    "machine learning",
    "cost functions",
    "regularization",
    "svm",
    "kmeans",
    "naive bayes",
    "tfidf",
    "regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mlplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
