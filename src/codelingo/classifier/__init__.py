"""Statistical content classifier."""

from codelingo.classifier.bayes import DEFAULT_SMOOTHING, Classifier
from codelingo.classifier.model import ClassifierModel
from codelingo.classifier.tokenizer import NUMBER_TOKEN, STRING_TOKEN, tokenize

__all__ = [
    "DEFAULT_SMOOTHING",
    "NUMBER_TOKEN",
    "STRING_TOKEN",
    "Classifier",
    "ClassifierModel",
    "tokenize",
]
