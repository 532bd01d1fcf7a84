# -*- test-case-name: txresolve.test.test_common -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Base functionality useful to the resolvers in a chain.
"""

from ipaddress import ip_address

from zope.interface import implementer

from twisted.internet import defer
from twisted.names import dns

from txresolve import error
from txresolve.domain import reverseDomain, toDomain
from txresolve.interfaces import IResolver

NO_FLAGS = frozenset()

_ANY_ADDRESS = (dns.Record_A, dns.Record_AAAA)
_IPV4_ADDRESS = (dns.Record_A,)
_IPV6_ADDRESS = (dns.Record_AAAA,)



def convertDeferred(source, converter, *args, **kwargs):
    """
    Derive a L{defer.Deferred} which fires with the result of C{source}
    passed through C{converter}.

    Failures of C{source}, and exceptions raised by C{converter}, fail the
    derived L{defer.Deferred}.  Cancelling the derived L{defer.Deferred}
    cancels C{source}; once C{source} has fired there is nothing left to
    cancel.

    @param source: The L{defer.Deferred} to convert.  The caller must not add
        further callbacks to it.
    @param converter: A one-argument callable, called as
        C{converter(result, *args, **kwargs)}.

    @return: The derived L{defer.Deferred}.
    """
    derived = defer.Deferred(lambda ignored: source.cancel())
    source.addCallback(converter, *args, **kwargs)
    source.chainDeferred(derived)
    return derived



def _checkedAnswers(answer):
    """
    Return the records of C{answer}, or raise the L{error.DNSResultError}
    its result code calls for.
    """
    if answer.resultCode != dns.OK:
        raise error.exceptionForCode(answer.resultCode)(
            answer.resultCode, answer.queryName)
    return answer.answers



def _payloads(answer, payloadTypes):
    for record in _checkedAnswers(answer):
        if type(record.payload) in payloadTypes:
            yield record.payload



def _allAddresses(answer, payloadTypes):
    return [ip_address(payload.address)
            for payload in _payloads(answer, payloadTypes)]



def _firstAddress(answer, payloadTypes):
    for payload in _payloads(answer, payloadTypes):
        return ip_address(payload.address)
    return None



def _pointerTarget(answer):
    for payload in _payloads(answer, (dns.Record_PTR,)):
        return payload.name
    return None



def _texts(answer):
    return [b"".join(payload.data)
            for payload in _payloads(answer, (dns.Record_TXT,))]



@implementer(IResolver)
class ResolverBase:
    """
    L{ResolverBase} is a base class for L{IResolver} implementations which
    derives every typed lookup from the single primitive C{_resolve}.

    Subclasses override C{_resolve(name, cls, type, flags)}, returning a
    L{defer.Deferred} which fires with an L{txresolve.answer.Answer}.

    Every typed lookup fails with an L{error.DNSResultError} subclass when
    the answer's result code is not L{dns.OK}, and fires with an empty list
    or L{None} when the answer simply holds no matching records.
    """

    def exceptionForCode(self, resultCode):
        """
        Convert a result code to the exception class representing it.

        @see: L{error.exceptionForCode}
        """
        return error.exceptionForCode(resultCode)


    def _resolve(self, name, cls, type, flags):
        return defer.fail(NotImplementedError("ResolverBase._resolve"))


    def resolve(self, name, type, *, cls=dns.IN, flags=NO_FLAGS):
        """
        Query for records of C{type} and C{cls}.

        C{cls} and C{flags} are keyword-only, since C{_resolve} takes
        C{cls} before C{type}.

        @see: L{IResolver.resolve}
        """
        return self._resolve(name, cls, type, flags)


    def query(self, query, flags=NO_FLAGS):
        """
        Resolve a L{dns.Query}.
        """
        return self._resolve(query.name, query.cls, query.type, flags)


    def _convertQuery(self, name, type, converter, *args):
        return convertDeferred(
            self.resolve(name, type), converter, *args)


    def resolveAllAddresses(self, name):
        """
        Look up every IPv4 and IPv6 address of C{name}.

        @return: A L{defer.Deferred} firing with a L{list} of
            L{ipaddress.IPv4Address} and L{ipaddress.IPv6Address}, in
            answer order.
        """
        return self._convertQuery(
            toDomain(name), dns.ALL_RECORDS, _allAddresses, _ANY_ADDRESS)


    def resolveAddress(self, name):
        """
        Look up the first IPv4 or IPv6 address of C{name}.

        @return: A L{defer.Deferred} firing with an address, or L{None}.
        """
        return self._convertQuery(
            toDomain(name), dns.ALL_RECORDS, _firstAddress, _ANY_ADDRESS)


    def resolveAllIPv4(self, name):
        """
        Look up every IPv4 address of C{name}.
        """
        return self._convertQuery(
            toDomain(name), dns.A, _allAddresses, _IPV4_ADDRESS)


    def resolveIPv4(self, name):
        """
        Look up the first IPv4 address of C{name}.
        """
        return self._convertQuery(
            toDomain(name), dns.A, _firstAddress, _IPV4_ADDRESS)


    def resolveAllIPv6(self, name):
        """
        Look up every IPv6 address of C{name}.
        """
        return self._convertQuery(
            toDomain(name), dns.AAAA, _allAddresses, _IPV6_ADDRESS)


    def resolveIPv6(self, name):
        """
        Look up the first IPv6 address of C{name}.
        """
        return self._convertQuery(
            toDomain(name), dns.AAAA, _firstAddress, _IPV6_ADDRESS)


    def resolveReverse(self, address):
        """
        Look up the name of C{address} with a C{PTR} query.

        @param address: See L{txresolve.domain.reverseDomain}.

        @return: A L{defer.Deferred} firing with the target L{dns.Name} of
            the first C{PTR} record, or L{None}.
        """
        return self._convertQuery(
            reverseDomain(address), dns.PTR, _pointerTarget)


    def resolveText(self, name):
        """
        Look up the C{TXT} records of C{name}.

        @return: A L{defer.Deferred} firing with a L{list} of L{bytes}, one
            per record, each record's strings joined together.
        """
        return self._convertQuery(toDomain(name), dns.TXT, _texts)



__all__ = ["NO_FLAGS", "convertDeferred", "ResolverBase"]
