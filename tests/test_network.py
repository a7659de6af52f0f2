import socket
from types import SimpleNamespace
from unittest.mock import patch

from messagerie.network import choose_address, local_ipv4


def test_loopback_and_docker_are_skipped():
    interfaces = [("lo", "127.0.0.1"), ("eth0", "10.0.0.5"), ("docker0", "172.17.0.1")]
    assert choose_address(interfaces) == "10.0.0.5"


def test_last_matching_interface_wins():
    interfaces = [("eth0", "10.0.0.5"), ("wlan0", "192.168.1.20")]
    assert choose_address(interfaces) == "192.168.1.20"


def test_no_usable_interface():
    assert choose_address([("lo", "127.0.0.1"), ("docker_gwbridge", "172.18.0.1")]) is None
    assert choose_address([]) is None


def test_name_only_prefixed_by_lo_is_kept():
    assert choose_address([("lo0x", "10.1.1.1")]) == "10.1.1.1"


def test_local_ipv4_uses_only_ipv4_entries():
    fake = {
        "lo": [SimpleNamespace(family=socket.AF_INET, address="127.0.0.1")],
        "eth0": [
            SimpleNamespace(family=socket.AF_INET, address="10.0.0.7"),
            SimpleNamespace(family=socket.AF_INET6, address="fe80::1"),
        ],
        "docker0": [SimpleNamespace(family=socket.AF_INET, address="172.17.0.1")],
    }
    with patch("psutil.net_if_addrs", return_value=fake):
        assert local_ipv4() == "10.0.0.7"