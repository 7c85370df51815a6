from .loader import get_default_reference_data, load_reference_data
from .schema import BenchmarkEntry, ReferenceData, UseCase

__all__ = [
    "BenchmarkEntry",
    "ReferenceData",
    "UseCase",
    "get_default_reference_data",
    "load_reference_data",
]
