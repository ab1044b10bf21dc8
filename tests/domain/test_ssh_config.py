"""Tests for ssh config parsing."""

from __future__ import annotations

from dasshboard.domain.hosts import HostType
from dasshboard.domain.ssh_config import is_ip_address, parse_ssh_config


class TestParseSshConfig:
    def test_basic_host(self) -> None:
        hosts = parse_ssh_config("Host web\n  HostName example.com\n  User deploy\n")
        assert len(hosts) == 1
        host = hosts[0]
        assert host.name == "web"
        assert host.hostname == "example.com"
        assert host.user == "deploy"
        assert host.type is HostType.SSH

    def test_hostname_defaults_to_alias(self) -> None:
        hosts = parse_ssh_config("Host nas\n")
        assert hosts[0].hostname == "nas"
        assert hosts[0].user is None

    def test_wildcards_skipped(self) -> None:
        text = "Host *\n  User nobody\nHost *.corp dev?\n  User x\nHost app\n"
        hosts = parse_ssh_config(text)
        assert [h.name for h in hosts] == ["app"]
        assert hosts[0].user is None

    def test_negated_alias_skipped(self) -> None:
        hosts = parse_ssh_config("Host !secret real\n  User me\n")
        assert [h.name for h in hosts] == ["real"]
        assert hosts[0].user == "me"

    def test_order_preserved(self) -> None:
        text = "Host zeta\nHost alpha\nHost mid\n"
        assert [h.name for h in parse_ssh_config(text)] == ["zeta", "alpha", "mid"]

    def test_first_value_wins(self) -> None:
        text = "Host web\n  HostName first.example\n  HostName second.example\n  User a\n  User b\n"
        host = parse_ssh_config(text)[0]
        assert host.hostname == "first.example"
        assert host.user == "a"

    def test_repeated_block_does_not_override(self) -> None:
        text = "Host web\n  User a\nHost web\n  User b\n"
        hosts = parse_ssh_config(text)
        assert len(hosts) == 1
        assert hosts[0].user == "a"

    def test_case_insensitive_keywords_and_equals(self) -> None:
        text = "HOST web\n  hostname=10.1.2.3\n  USER = ops\n"
        host = parse_ssh_config(text)[0]
        assert host.hostname == "10.1.2.3"
        assert host.user == "ops"

    def test_comments_and_blank_lines(self) -> None:
        text = "# top comment\n\nHost web  # trailing\n  # User ignored\n  User real\n"
        host = parse_ssh_config(text)[0]
        assert host.name == "web"
        assert host.user == "real"

    def test_match_block_ends_host(self) -> None:
        text = "Host web\n  User a\nMatch host *\n  User b\n"
        host = parse_ssh_config(text)[0]
        assert host.user == "a"

    def test_pattern_only_host_line_ends_previous(self) -> None:
        text = "Host web\nHost *\n  User everyone\n"
        assert parse_ssh_config(text)[0].user is None

    def test_multiple_aliases(self) -> None:
        hosts = parse_ssh_config("Host one two\n  User shared\n")
        assert [h.name for h in hosts] == ["one", "two"]
        # Directives apply to the last alias on the line.
        assert hosts[1].user == "shared"

    def test_empty(self) -> None:
        assert parse_ssh_config("") == []


class TestIsIpAddress:
    def test_ipv4(self) -> None:
        assert is_ip_address("192.168.1.10")

    def test_ipv6(self) -> None:
        assert is_ip_address("::1")

    def test_hostname(self) -> None:
        assert not is_ip_address("example.com")
