"""Curator - recommendations and the collections that curate them.

A REST service over a relational database for users, the recommendations
they author, and the collections grouping those recommendations.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
