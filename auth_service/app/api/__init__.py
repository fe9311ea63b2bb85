# Expose api submodules as package attributes so code that does
# `from .api import health` works as expected.
from . import health

__all__ = ["health"]
