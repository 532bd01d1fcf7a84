# -*- test-case-name: txresolve -*-

# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
txresolve: chained, Deferred-based DNS resolution for Twisted.

A chain of L{txresolve.interfaces.IResolver} providers answers structured
queries with L{txresolve.answer.Answer}s.  L{txresolve.common.ResolverBase}
derives address, reverse and text lookups from that single primitive, and
L{txresolve.hosts.HostsResolver} answers address lookups from a hosts(5)
table before handing everything else to the next resolver.
"""

from txresolve._version import __version__ as version

__version__ = version.short()
