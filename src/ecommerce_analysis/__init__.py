"""
eCommerce Sales Analysis

Batch pipeline that cleans a sales extract and reports top products,
peak/lowest sales months and customer counts by state.
"""

__version__ = "1.0.0"
__author__ = "Data Engineering Team"

__all__ = [
    "__version__",
    "__author__",
]
