"""Distributions: mappings from bit-source output to typed values."""

from entropic.distributions.base import Distribution
from entropic.distributions.bernoulli import Bernoulli
from entropic.distributions.standard import Array, Standard
from entropic.distributions.uniform import Uniform, sample_single

__all__ = [
    "Array",
    "Bernoulli",
    "Distribution",
    "Standard",
    "Uniform",
    "sample_single",
]
