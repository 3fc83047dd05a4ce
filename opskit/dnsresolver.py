"""An iterative DNS resolver that starts at the root servers."""

from __future__ import annotations

import ipaddress
import secrets
import socket
from typing import Any, Iterable, Optional, Union

import dns.exception
import dns.flags
import dns.message
import dns.name
import dns.rcode
import dns.rdataclass
import dns.rdatatype
import dns.rrset

ROOT_SERVERS = (
    "198.41.0.4,199.9.14.201,192.33.4.12,199.7.91.13,"
    "192.203.230.10,192.5.5.241,192.112.36.4,198.97.190.53"
)

DNS_PORT = 53
MAX_PACKET_SIZE = 512
DEFAULT_TIMEOUT = 5.0
MAX_ITERATIONS = 3

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def get_root_servers() -> list[IPAddress]:
    """Return the addresses of the root name servers."""
    return [ipaddress.ip_address(server) for server in ROOT_SERVERS.split(",")]


def _question(
    name: Union[str, dns.name.Name],
    rdtype: int = dns.rdatatype.A,
    rdclass: int = dns.rdataclass.IN,
) -> dns.rrset.RRset:
    if isinstance(name, str):
        name = dns.name.from_text(name)
    return dns.rrset.RRset(name, rdclass, rdtype)


def _describe(question: dns.rrset.RRset) -> str:
    return (
        f"{question.name} {dns.rdatatype.to_text(question.rdtype)} "
        f"{dns.rdataclass.to_text(question.rdclass)}"
    )


def _connect(servers: list[Any], port: int, timeout: float) -> socket.socket:
    last_error: Optional[Exception] = None
    for server in servers:
        try:
            address = ipaddress.ip_address(str(server))
            family = socket.AF_INET6 if address.version == 6 else socket.AF_INET
            sock = socket.socket(family, socket.SOCK_DGRAM)
        except (ValueError, OSError) as exc:
            last_error = exc
            continue
        try:
            sock.settimeout(timeout)
            sock.connect((str(address), port))
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        return sock
    raise ConnectionError(f"failed to make connection to servers: {last_error}")


def outgoing_dns_query(servers: Iterable[Any], question: dns.rrset.RRset) -> dns.message.Message:
    """Send one non-recursive query to the first reachable server and parse the reply.

    Raises ConnectionError when no server can be reached, OSError on socket
    failures and ValueError when the reply cannot be parsed or does not match.
    """
    servers = list(servers)
    print(
        f"New outgoing dns query for {question.name}, "
        f"servers: [{' '.join(str(server) for server in servers)}]"
    )
    query = dns.message.make_query(question.name, question.rdtype, question.rdclass)
    query.id = secrets.randbelow(0xFFFF)
    query.flags = 0
    wire = query.to_wire()

    with _connect(servers, DNS_PORT, DEFAULT_TIMEOUT) as sock:
        sock.send(wire)
        data = sock.recv(MAX_PACKET_SIZE)

    try:
        answer = dns.message.from_wire(data)
    except dns.exception.DNSException as exc:
        raise ValueError(f"parser start error: {exc}") from exc

    if len(answer.question) != len(query.question):
        raise ValueError("answer packet doesn't have the same amount of questions")
    return answer


def _empty_message(flags: int = 0, rcode: int = dns.rcode.NOERROR) -> dns.message.Message:
    message = dns.message.Message(id=0)
    message.flags = flags
    message.set_rcode(rcode)
    return message


def _a_addresses(rrsets: Iterable[dns.rrset.RRset]) -> list[str]:
    return [
        rdata.address
        for rrset in rrsets
        if rrset.rdtype == dns.rdatatype.A
        for rdata in rrset
    ]


def dns_query(servers: Iterable[Any], question: dns.rrset.RRset) -> dns.message.Message:
    """Resolve a question by following referrals from the given servers.

    Returns the answer message; NXDOMAIN when a server neither answers nor
    refers, SERVFAIL when no authoritative answer is reached in time.
    """
    print(f"Question: {_describe(question)}")
    servers = list(servers)
    for _ in range(MAX_ITERATIONS):
        answer = outgoing_dns_query(servers, question)

        if answer.flags & dns.flags.AA:
            response = _empty_message(flags=dns.flags.QR)
            response.answer = list(answer.answer)
            return response

        if not answer.authority:
            return _empty_message(rcode=dns.rcode.NXDOMAIN)

        nameservers = [
            rdata.target.to_text()
            for rrset in answer.authority
            if rrset.rdtype == dns.rdatatype.NS
            for rdata in rrset
        ]

        found = False
        servers = []
        for additional in answer.additional:
            if additional.rdtype != dns.rdatatype.A:
                continue
            owner = additional.name.to_text()
            for nameserver in nameservers:
                if owner == nameserver:
                    found = True
                    servers.extend(rdata.address for rdata in additional)

        if not found:
            for nameserver in nameservers:
                if found:
                    break
                try:
                    lookup = dns_query(
                        get_root_servers(),
                        _question(nameserver, dns.rdatatype.A, dns.rdataclass.IN),
                    )
                except Exception as exc:
                    print(f"warning: lookup of nameserver {nameserver} failed: {exc}")
                    continue
                found = True
                servers.extend(_a_addresses(lookup.answer))

    return _empty_message(rcode=dns.rcode.SERVFAIL)


def handle_packet(sock: Any, addr: Any, buf: bytes) -> None:
    """Answer one incoming query packet by resolving it and sending the reply to addr."""
    try:
        query = dns.message.from_wire(bytes(buf))
    except dns.exception.DNSException as exc:
        raise ValueError(f"invalid query packet: {exc}") from exc
    if not query.question:
        raise ValueError("query packet has no question")

    response = dns_query(get_root_servers(), query.question[0])
    response.id = query.id
    sock.sendto(response.to_wire(), addr)