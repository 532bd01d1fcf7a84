# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Provides txresolve version information.
"""

from incremental import Version

__version__ = Version("txresolve", 1, 0, 0)
__all__ = ["__version__"]
