import ipaddress

import dns.message
import dns.name
import dns.rdataclass
import dns.rdatatype
import dns.rrset
import pytest

from opskit.dnsresolver import (
    ROOT_SERVERS,
    dns_query,
    get_root_servers,
    handle_packet,
    outgoing_dns_query,
)


def _q(name, rdtype=dns.rdatatype.A):
    return dns.rrset.RRset(dns.name.from_text(name), dns.rdataclass.IN, rdtype)


class _RecordingSocket:
    def __init__(self):
        self.sent = []

    def sendto(self, data, addr):
        self.sent.append((data, addr))
        return len(data)


def test_root_servers_match_constant():
    servers = get_root_servers()
    assert len(servers) == 8
    assert servers[0] == ipaddress.ip_address("198.41.0.4")
    assert ",".join(str(server) for server in servers) == ROOT_SERVERS


def test_root_servers_are_fresh_lists():
    first = get_root_servers()
    first.clear()
    assert len(get_root_servers()) == 8


def test_outgoing_dns_query_without_servers():
    with pytest.raises(ConnectionError, match="failed to make connection"):
        outgoing_dns_query([], _q("www.example.com."))


def test_dns_query_without_servers_propagates_error():
    with pytest.raises(ConnectionError, match="failed to make connection"):
        dns_query([], _q("www.example.com."))


def test_handle_packet_without_question():
    empty = dns.message.Message(id=7)
    sock = _RecordingSocket()
    with pytest.raises(ValueError, match="no question"):
        handle_packet(sock, ("127.0.0.1", 5353), empty.to_wire())
    assert sock.sent == []


def test_handle_packet_with_garbage():
    sock = _RecordingSocket()
    with pytest.raises(ValueError, match="invalid query packet"):
        handle_packet(sock, ("127.0.0.1", 5353), b"\x00")
    assert sock.sent == []