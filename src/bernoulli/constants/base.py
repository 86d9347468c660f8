# src/bernoulli/constants/base.py
from __future__ import annotations
from dataclasses import dataclass, replace, fields, asdict
from contextlib import contextmanager
from typing import Any, Iterator

@dataclass(frozen=True)
class FrozenNamespace:
    """Immutable bag of constants. Values are plain floats (SI, temperatures in °C)."""

    def as_dict(self) -> dict:
        return asdict(self)

@contextmanager
def override(obj: FrozenNamespace, **updates: Any) -> Iterator[FrozenNamespace]:
    """
    Yields a modified copy of a FrozenNamespace, the original is left untouched.
    Usage:
        with override(OIL, rho_ref=880.0) as O:
            rho, mu = oil_density_and_viscosity(40, O)
    """
    unknown = set(updates) - {f.name for f in fields(obj)}
    if unknown:
        raise KeyError(f'{type(obj).__name__} has no constant named {", ".join(sorted(unknown))}')
    yield replace(obj, **updates)
