# -*- test-case-name: txresolve.test.test_resolve -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Resolvers for building and ending a chain.
"""

import os

from twisted.internet import defer
from twisted.logger import Logger
from twisted.names import dns, error as nameserror
from twisted.python.filepath import FilePath
from twisted.python.runtime import platform

from txresolve.answer import Answer
from txresolve.common import ResolverBase
from txresolve.domain import toDomain
from txresolve.hosts import HostsResolver

log = Logger()

_codeForError = {
    nameserror.DNSFormatError: dns.EFORMAT,
    nameserror.DNSServerError: dns.ESERVER,
    nameserror.DNSNameError: dns.ENAME,
    nameserror.DNSNotImplementedError: dns.ENOTIMP,
    nameserror.DNSQueryRefusedError: dns.EREFUSED,
    nameserror.DomainError: dns.ENAME,
}



class TerminalResolver(ResolverBase):
    """
    The last link of a chain: answers every query with C{resultCode} and no
    records.
    """

    def __init__(self, resultCode=dns.ENAME):
        ResolverBase.__init__(self)
        self.resultCode = resultCode


    def __repr__(self) -> str:
        return "<TerminalResolver resultCode=%d>" % (self.resultCode,)


    def _resolve(self, name, cls, type, flags):
        return defer.succeed(Answer(toDomain(name), cls, type, self.resultCode))



class NamesResolver(ResolverBase):
    """
    Put a L{twisted.names} resolver, such as L{twisted.names.client.Resolver},
    into a chain.

    Failures the wrapped resolver reports for a DNS response code become
    answers carrying that code; any other failure is passed on.  Cancelling
    a lookup cancels the wrapped resolver's query.

    @ivar resolver: The wrapped L{twisted.internet.interfaces.IResolver}.
    """

    def __init__(self, resolver):
        ResolverBase.__init__(self)
        self.resolver = resolver


    def _resolve(self, name, cls, type, flags):
        query = dns.Query(toDomain(name).name, type, cls)
        d = self.resolver.query(query)
        d.addCallbacks(self._cbAnswer, self._ebAnswer,
                       callbackArgs=(query,), errbackArgs=(query,))
        return d


    def _cbAnswer(self, result, query):
        answers, authority, additional = result
        return Answer.fromQuery(query, dns.OK, answers)


    def _ebAnswer(self, failure, query):
        resultCode = _codeForError[failure.trap(*_codeForError)]
        log.debug("{query} answered with result code {resultCode}",
                  query=query, resultCode=resultCode)
        return Answer.fromQuery(query, resultCode)



def defaultHostsFile():
    """
    Return the path of the platform's hosts file.
    """
    if platform.isWindows():
        return os.path.join(
            os.environ.get("SystemRoot", "C:\\Windows"),
            "System32", "drivers", "etc", "hosts")
    return "/etc/hosts"



def createResolver(hosts=None, next=None, encoding=None):
    """
    Create a L{HostsResolver} in front of C{next}.

    @param hosts: The hosts file to load, as a L{FilePath} or path string.
        When omitted the platform hosts file is loaded if it exists.
    @param next: The resolver to delegate to; a L{TerminalResolver} answering
        L{dns.ENAME} when omitted.
    @param encoding: The encoding of the hosts file, or L{None} for the
        platform default.

    @raise OSError: If an explicitly given C{hosts} file cannot be read.
    """
    if next is None:
        next = TerminalResolver()
    resolver = HostsResolver(next)
    if hosts is None:
        hosts = FilePath(defaultHostsFile())
        if not hosts.exists():
            log.warn("No hosts file at {path}; the hosts table is empty",
                     path=hosts.path)
            return resolver
    resolver.initializeFromFile(hosts, encoding)
    return resolver



__all__ = [
    "TerminalResolver", "NamesResolver", "defaultHostsFile", "createResolver",
]
