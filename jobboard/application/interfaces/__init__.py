# Interfaces Package
from .store_port import StorePort

__all__ = ["StorePort"]
