"""
petclinic_customers

Top-level package for the Petclinic customers (owners) service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
