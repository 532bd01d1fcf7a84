# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Run a lookup: C{python -m txresolve [options] NAME}.
"""

from txresolve.scripts.lookup import run

if __name__ == "__main__":
    run()
