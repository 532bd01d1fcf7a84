# -*- test-case-name: txresolve.test.test_hosts -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
hosts(5) support.
"""

import io
from ipaddress import IPv4Address, IPv6Address
from typing import Dict, Iterable, List, Tuple

from twisted.internet import defer
from twisted.logger import Logger
from twisted.names import dns
from twisted.python.filepath import FilePath

from txresolve.answer import Answer
from txresolve.common import ResolverBase
from txresolve.domain import SYNTHETIC_TTL, Address, parseAddress, toDomain

HostsTable = Dict[dns.Name, Tuple[Address, ...]]



def parseHosts(lines: Iterable[str]) -> HostsTable:
    """
    Parse hosts(5) formatted text.

    Everything after a C{#} is a comment.  The first field of a line is an
    address and every further field a host name for it; lines without a
    host name are ignored.  A host name listed on several lines collects
    the addresses of all of them, in file order.

    @param lines: The lines of the file.

    @return: A mapping of normalized names to their addresses.

    @raise txresolve.error.AddressParseError: If an address is invalid.
    @raise txresolve.error.DomainParseError: If a host name is invalid.
    """
    table: Dict[dns.Name, List[Address]] = {}
    for line in lines:
        line = line.split("#", 1)[0].strip()
        parts = line.split()
        if len(parts) < 2:
            continue
        address = parseAddress(parts[1], parts[0])
        for hostName in parts[1:]:
            table.setdefault(toDomain(hostName), []).append(address)
    return {name: tuple(addresses) for (name, addresses) in table.items()}



class HostsResolver(ResolverBase):
    """
    A resolver that answers address queries from a hosts(5) table and hands
    every other query to the next resolver in the chain.

    The table is replaced as a whole by L{initialize}; a lookup reads it
    exactly once.  Concurrent calls to L{initialize} are not ordered: the
    last to finish parsing wins.

    @ivar _next: The L{txresolve.interfaces.IResolver} to delegate to.
    @ivar _hosts: The current L{HostsTable}.
    """

    _log = Logger()

    def __init__(self, next):
        ResolverBase.__init__(self)
        self._next = next
        self._hosts: HostsTable = {}


    def initialize(self, source: Iterable[str]) -> None:
        """
        Replace the table with the contents of a hosts file.

        If reading or parsing fails the current table is kept.

        @param source: The text of the file, as an iterable of lines such
            as a file opened in text mode.

        @raise txresolve.error.AddressParseError: If an address is invalid.
        @raise OSError: If C{source} cannot be read.
        """
        hosts = parseHosts(source)
        self._hosts = hosts
        self._log.info("Loaded {count} host names", count=len(hosts))


    def initializeFromFile(self, path, encoding=None) -> None:
        """
        Replace the table with the contents of the hosts file at C{path}.

        @param path: A L{FilePath} or a path string.
        @param encoding: The encoding of the file, or L{None} for the
            platform default.

        @see: L{initialize}
        """
        if not isinstance(path, FilePath):
            path = FilePath(path)
        self._log.debug("Reading hosts file {path}", path=path.path)
        with path.open() as raw:
            with io.TextIOWrapper(raw, encoding=encoding) as source:
                self.initialize(source)


    def _resolve(self, name, cls, type, flags):
        """
        Answer from the table when it lists C{name} and C{cls} is
        L{dns.IN} or L{dns.ANY}, otherwise delegate.
        """
        if cls in (dns.IN, dns.ANY):
            domain = toDomain(name)
            addresses = self._hosts.get(domain)
            if addresses is not None:
                self._log.debug("Answering {name} from hosts table",
                                name=domain)
                return defer.succeed(
                    self._synthesize(domain, cls, type, addresses))
        return self._next.resolve(name, type, cls=cls, flags=flags)


    def _synthesize(self, domain, cls, type, addresses):
        builder = Answer.builder()
        builder.setQueryName(domain).setQueryClass(cls).setQueryType(type)
        wantV4 = type in (dns.A, dns.ALL_RECORDS)
        wantV6 = type in (dns.AAAA, dns.ALL_RECORDS)
        for address in addresses:
            if wantV4 and isinstance(address, IPv4Address):
                builder.addAnswerRecord(dns.RRHeader(
                    domain.name, dns.A, dns.IN, SYNTHETIC_TTL,
                    dns.Record_A(str(address), SYNTHETIC_TTL)))
            elif wantV6 and isinstance(address, IPv6Address):
                # Record_AAAA cannot carry a scope id.
                unscoped = IPv6Address(address.packed)
                builder.addAnswerRecord(dns.RRHeader(
                    domain.name, dns.AAAA, dns.IN, SYNTHETIC_TTL,
                    dns.Record_AAAA(str(unscoped), SYNTHETIC_TTL)))
        return builder.create()



__all__ = ["HostsTable", "parseHosts", "HostsResolver"]
