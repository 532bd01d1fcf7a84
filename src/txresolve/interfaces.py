# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Interface documentation.
"""

from constantly import NamedConstant, Names
from zope.interface import Interface



class ResolverFlag(Names):
    """
    Query modifiers.  Resolvers pass a C{frozenset} of these along the chain
    unchanged; only the resolver which finally answers may act on them.

    @cvar NO_RECURSION: Do not ask upstream servers to recurse.
    @cvar NO_CACHE: Do not answer from, or populate, a cache.
    @cvar CHECKING_DISABLED: Do not perform DNSSEC validation.
    """

    NO_RECURSION = NamedConstant()
    NO_CACHE = NamedConstant()
    CHECKING_DISABLED = NamedConstant()



class IResolver(Interface):
    """
    A link in a resolver chain.
    """

    def resolve(name, type, *, cls, flags):
        """
        Query for records.

        @param name: The name to query.
        @type name: L{twisted.names.dns.Name}

        @param type: The record type, such as L{twisted.names.dns.A} or
            L{twisted.names.dns.ALL_RECORDS}.

        @param cls: The record class, L{twisted.names.dns.IN} when omitted.

        @param flags: A C{frozenset} of L{ResolverFlag}s, empty when omitted.

        @return: A L{twisted.internet.defer.Deferred} which fires with a
            L{txresolve.answer.Answer}.  Answers with a result code other
            than L{twisted.names.dns.OK} are results, not failures.
        """



__all__ = ["ResolverFlag", "IResolver"]
