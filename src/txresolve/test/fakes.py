# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Resolvers and records shared by the txresolve tests.
"""

from zope.interface import implementer

from twisted.internet import defer
from twisted.names import dns

from txresolve.interfaces import IResolver



@implementer(IResolver)
class RecordingResolver:
    """
    An L{IResolver} which records each query and answers it with a
    L{defer.Deferred} the test fires.

    @ivar queries: A C{list} of C{(name, type, cls, flags, deferred)}.
    @ivar cancelled: A C{list} of the deferreds which were cancelled.
    """

    def __init__(self):
        self.queries = []
        self.cancelled = []


    def resolve(self, name, type, *, cls=dns.IN, flags=frozenset()):
        d = defer.Deferred(self.cancelled.append)
        self.queries.append((name, type, cls, flags, d))
        return d



def aRecord(name, address, ttl=60):
    return dns.RRHeader(name, dns.A, dns.IN, ttl, dns.Record_A(address, ttl))



def aaaaRecord(name, address, ttl=60):
    return dns.RRHeader(
        name, dns.AAAA, dns.IN, ttl, dns.Record_AAAA(address, ttl))



def ptrRecord(name, target, ttl=60):
    return dns.RRHeader(
        name, dns.PTR, dns.IN, ttl, dns.Record_PTR(target, ttl))



def txtRecord(name, *data):
    return dns.RRHeader(
        name, dns.TXT, dns.IN, 60, dns.Record_TXT(*data, ttl=60))
