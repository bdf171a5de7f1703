from .repro import make_rng

__all__ = ["make_rng"]
