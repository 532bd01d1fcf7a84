# -*- test-case-name: txresolve.test.test_lookup -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Usage: txresolve-lookup [options] NAME

Look up NAME in the hosts file, then, if --server is given, ask that name
server.  For example:

 txresolve-lookup --kind ipv4 localhost
 txresolve-lookup --server 192.0.2.53 --kind reverse 192.0.2.1
"""

import sys

from twisted.internet import defer
from twisted.internet.task import react
from twisted.logger import (
    FilteringLogObserver, LogLevel, LogLevelFilterPredicate,
    globalLogBeginner, textFileLogObserver,
)
from twisted.names import client, dns
from twisted.python import usage

from txresolve.error import AddressParseError, DNSResultError, DomainParseError
from txresolve.resolve import NamesResolver, createResolver

KINDS = {
    "address": "resolveAddress",
    "all-addresses": "resolveAllAddresses",
    "ipv4": "resolveIPv4",
    "all-ipv4": "resolveAllIPv4",
    "ipv6": "resolveIPv6",
    "all-ipv6": "resolveAllIPv6",
    "text": "resolveText",
    "reverse": "resolveReverse",
}



def parseServer(value):
    """
    Parse C{HOST}, C{HOST:PORT} or C{[IPV6]:PORT} into a C{(host, port)}
    tuple, defaulting the port to L{dns.PORT}.

    @raise usage.UsageError: If the port is not a number.
    """
    host, port = value, dns.PORT
    if value.startswith("["):
        host, _, rest = value[1:].partition("]")
        if rest:
            port = rest.lstrip(":")
    elif value.count(":") == 1:
        host, port = value.split(":")
    try:
        port = int(port)
    except ValueError:
        raise usage.UsageError("Invalid port in server %r" % (value,))
    return host, port



class Options(usage.Options):
    synopsis = __doc__.strip().splitlines()[0]

    optFlags = [
        ["verbose", "v", "Log debugging information to stderr."],
    ]

    optParameters = [
        ["hosts-file", "f", None,
         "The hosts file to consult (default: the platform hosts file)."],
        ["encoding", "e", None,
         "The encoding of the hosts file (default: the platform encoding)."],
        ["server", "s", None,
         "A name server, HOST[:PORT], for names not in the hosts file."],
        ["kind", "k", "all-addresses",
         "What to look up: " + ", ".join(sorted(KINDS)) + "."],
    ]


    def parseArgs(self, name):
        self["name"] = name


    def postOptions(self):
        if self["kind"] not in KINDS:
            raise usage.UsageError("Unknown kind %r" % (self["kind"],))
        if self["server"] is not None:
            self["server"] = parseServer(self["server"])



def startLogging(verbose, stream=None):
    """
    Send log events to C{stream}, standard error by default: warnings and
    worse, or everything when C{verbose} is set.
    """
    if stream is None:
        stream = sys.stderr
    predicate = LogLevelFilterPredicate(
        defaultLogLevel=LogLevel.debug if verbose else LogLevel.warn)
    observer = FilteringLogObserver(textFileLogObserver(stream), [predicate])
    globalLogBeginner.beginLoggingTo([observer], redirectStandardIO=False)



def _format(value):
    if isinstance(value, bytes):
        return value.decode("utf-8", "backslashreplace")
    return str(value)



def printResult(result, name, stdout=None):
    """
    Print each result on its own line.

    @raise SystemExit: If there is no result.
    """
    if stdout is None:
        stdout = sys.stdout
    if result is None or result == []:
        raise SystemExit("ERROR: no records found for %r" % (name,))
    if not isinstance(result, list):
        result = [result]
    for value in result:
        stdout.write(_format(value) + "\n")



def printError(failure, name):
    """
    Turn a failed lookup into an exit message.

    @raise SystemExit: For lookups which failed with a DNS result code or
        were given an invalid name or address.
    """
    failure.trap(DNSResultError, AddressParseError, DomainParseError)
    raise SystemExit("ERROR: lookup of %r failed: %s" % (name, failure.value))



def lookup(resolver, kind, name, stdout=None):
    """
    Run the lookup named by C{kind} on C{resolver} and print the result.

    @param kind: One of the keys of L{KINDS}.

    @return: A L{defer.Deferred} which fires with L{None} once the result has
        been printed, or fails with L{SystemExit}.
    """
    d = defer.maybeDeferred(getattr(resolver, KINDS[kind]), name)
    d.addCallback(printResult, name, stdout)
    d.addErrback(printError, name)
    return d



def main(reactor, *argv):
    options = Options()
    try:
        options.parseOptions(argv)
    except usage.UsageError as errortext:
        sys.stderr.write(str(options) + "\n")
        sys.stderr.write("ERROR: %s\n" % (errortext,))
        raise SystemExit(1)

    startLogging(options["verbose"])

    next = None
    if options["server"] is not None:
        next = NamesResolver(
            client.Resolver(servers=[options["server"]], reactor=reactor))
    try:
        resolver = createResolver(
            options["hosts-file"], next, options["encoding"])
    except (OSError, ValueError, LookupError) as e:
        raise SystemExit("ERROR: cannot load hosts file: %s" % (e,))
    return lookup(resolver, options["kind"], options["name"])



def run():
    react(main, sys.argv[1:])



__all__ = ["Options", "lookup", "main", "run"]
