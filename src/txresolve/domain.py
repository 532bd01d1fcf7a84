# -*- test-case-name: txresolve.test.test_domain -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Helpers for turning host names and addresses into L{dns.Name}s.

L{twisted.names.dns} supplies the value model: names, queries and records.
This module only normalizes the inputs handed to it.
"""

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

from twisted.names import dns

from txresolve.error import AddressParseError, DomainParseError

# Records with no real expiry, such as those read from a hosts file.
SYNTHETIC_TTL = 0

Address = Union[IPv4Address, IPv6Address]



def toDomain(name) -> dns.Name:
    """
    Normalize C{name} into a lower-case L{dns.Name} without a trailing dot.

    @param name: A L{dns.Name}, L{bytes} or L{str}.  Text is IDNA-encoded.

    @raise TypeError: If C{name} is L{None} or of an unsupported type.
    @raise DomainParseError: If C{name} cannot be IDNA-encoded.
    """
    if name is None:
        raise TypeError("name is None")
    if isinstance(name, dns.Name):
        name = name.name
    if isinstance(name, str):
        try:
            name = name.rstrip(".").encode("idna")
        except UnicodeError:
            raise DomainParseError(name) from None
    elif not isinstance(name, bytes):
        raise TypeError("%r is not a domain name" % (name,))
    return dns.Name(name.rstrip(b".").lower())



def parseAddress(hostName, literal) -> Address:
    """
    Parse an IPv4 or IPv6 address literal.

    @param hostName: The host name C{literal} belongs to, reported in the
        error if parsing fails.
    @param literal: The address text.

    @raise AddressParseError: If C{literal} is not an address.
    """
    try:
        return ip_address(literal)
    except ValueError:
        raise AddressParseError(hostName, literal) from None



def reverseDomain(address) -> dns.Name:
    """
    Compute the C{in-addr.arpa} or C{ip6.arpa} name used to look up the
    C{PTR} record for C{address}.

    @param address: An L{IPv4Address} or L{IPv6Address}, an address literal,
        or a packed 4 or 16 byte address.

    @raise TypeError: If C{address} is L{None}.
    @raise AddressParseError: If C{address} is not an address.
    """
    if address is None:
        raise TypeError("address is None")
    if not isinstance(address, (IPv4Address, IPv6Address)):
        try:
            address = ip_address(address)
        except ValueError:
            raise AddressParseError(None, address) from None
    if isinstance(address, IPv6Address):
        # reverse_pointer rejects scoped addresses.
        address = IPv6Address(address.packed)
    return dns.Name(address.reverse_pointer.encode("ascii"))



__all__ = [
    "SYNTHETIC_TTL", "Address", "toDomain", "parseAddress", "reverseDomain",
]
