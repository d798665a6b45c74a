"""
Configuration management for staggerfv.

Validated, immutable parameter containers for the grid and the runtime,
grouped in CoreConfig, which reads and writes YAML files.
"""

from staggerfv.params.schema import CoreConfig, GridParams, RuntimeParams, ValidationError

__all__ = [
    "GridParams",
    "RuntimeParams",
    "CoreConfig",
    "ValidationError",
]
