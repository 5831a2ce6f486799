"""Computational backends for hypothesis tests."""

from statbox.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = ["CPUHypothesisBackend"]
