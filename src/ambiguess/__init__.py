"""ambiguess: guess what an ambiguous string might be.

Byte counts, UNIX timestamps at several resolutions, dates with or
without a zone, and IP addresses, each ranked by how plausible it is.
"""

__version__ = "0.1.0"
