"""
devtools_har/data_models/__init__.py

Typed HAR models: the HAR 1.2 base layer and its DevTools extension layer.
"""

from devtools_har.data_models.har_object import HarObject

__all__ = ["HarObject"]
