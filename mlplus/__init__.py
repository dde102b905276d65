"""Cost functions, data preparation, text features and classic machine-learning models."""

__version__ = "0.1.0"