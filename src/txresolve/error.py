# -*- test-case-name: txresolve.test.test_common -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Exception class definitions for txresolve.
"""

from twisted.names import dns


class DNSResultError(Exception):
    """
    A query completed, but its answer carried a result code other than
    L{dns.OK}.

    @ivar resultCode: The result code of the answer, one of the response code
        constants from L{twisted.names.dns}.
    @type resultCode: L{int}

    @ivar name: The name which was queried, if known.
    @type name: L{dns.Name} or L{None}
    """

    def __init__(self, resultCode, name=None):
        Exception.__init__(self, resultCode, name)
        self.resultCode = resultCode
        self.name = name


    def __str__(self) -> str:
        if self.name is None:
            return "DNS query failed with result code %d" % (self.resultCode,)
        return "DNS query for %s failed with result code %d" % (
            self.name, self.resultCode)



class DNSFormatError(DNSResultError):
    """
    The server was unable to interpret the query.
    """



class DNSServerError(DNSResultError):
    """
    The server was unable to process the query due to a problem with the
    server.
    """



class DNSNameError(DNSResultError):
    """
    The domain name referenced in the query does not exist.
    """



class DNSNotImplementedError(DNSResultError):
    """
    The server does not support the requested kind of query.
    """



class DNSQueryRefusedError(DNSResultError):
    """
    The server refused to perform the specified operation for policy reasons.
    """



class DNSUnknownError(DNSResultError):
    """
    The answer carried a result code with no more specific exception.
    """



_errormap = {
    dns.EFORMAT: DNSFormatError,
    dns.ESERVER: DNSServerError,
    dns.ENAME: DNSNameError,
    dns.ENOTIMP: DNSNotImplementedError,
    dns.EREFUSED: DNSQueryRefusedError,
}



def exceptionForCode(resultCode):
    """
    Convert a result code to the exception class representing it.

    @param resultCode: A result code other than L{dns.OK}.

    @return: A subclass of L{DNSResultError}.
    """
    return _errormap.get(resultCode, DNSUnknownError)



class AddressParseError(ValueError):
    """
    An address literal could not be parsed as an IPv4 or IPv6 address.

    @ivar hostName: The host name the literal was given for, if any.
    @ivar literal: The rejected literal.
    """

    def __init__(self, hostName, literal):
        ValueError.__init__(self, hostName, literal)
        self.hostName = hostName
        self.literal = literal


    def __str__(self) -> str:
        if self.hostName is None:
            return "Invalid address %r" % (self.literal,)
        return "Invalid address %r for host %r" % (self.literal, self.hostName)



class DomainParseError(ValueError):
    """
    A host name could not be converted to a domain name.

    @ivar name: The rejected name.
    """

    def __init__(self, name):
        ValueError.__init__(self, name)
        self.name = name



__all__ = [
    "DNSResultError", "DNSFormatError", "DNSServerError", "DNSNameError",
    "DNSNotImplementedError", "DNSQueryRefusedError", "DNSUnknownError",
    "exceptionForCode", "AddressParseError", "DomainParseError",
]
