"""Tests for trusted-proxy client address resolution (install_proxy_headers + client_ip)."""

import unittest

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from app.main import install_proxy_headers
from app.web.dependencies import client_ip


def _echo_client_app(forwarded_allow_ips: str) -> FastAPI:
    """Minimal app that returns the address client_ip resolves."""
    echo = FastAPI()

    @echo.get("/ip")
    def read_ip(request: Request) -> dict[str, str]:
        return {"ip": client_ip(request)}

    install_proxy_headers(echo, forwarded_allow_ips)
    return echo


class TestClientIpBehindProxy(unittest.TestCase):
    def test_forwarded_header_ignored_by_default(self) -> None:
        client = TestClient(_echo_client_app(""))
        body = client.get("/ip", headers={"X-Forwarded-For": "203.0.113.7"}).json()
        self.assertEqual(body["ip"], "testclient")

    def test_forwarded_header_used_for_trusted_proxy(self) -> None:
        client = TestClient(_echo_client_app("*"))
        body = client.get("/ip", headers={"X-Forwarded-For": "203.0.113.7"}).json()
        self.assertEqual(body["ip"], "203.0.113.7")

    def test_distinct_clients_get_distinct_addresses(self) -> None:
        client = TestClient(_echo_client_app("*"))
        first = client.get("/ip", headers={"X-Forwarded-For": "203.0.113.7"}).json()
        second = client.get("/ip", headers={"X-Forwarded-For": "198.51.100.2"}).json()
        self.assertNotEqual(first["ip"], second["ip"])


if __name__ == "__main__":
    unittest.main()
