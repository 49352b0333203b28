# tests/core/test_tenant.py
from __future__ import annotations

import pytest

from pathroute.contracts.tenant import TenantPathMatch, TenantResolution, TenantSource
from pathroute.core.router_config import RouterConfig
from pathroute.core.tenant import (
    extract_tenant_from_path,
    extract_tenant_from_subdomain,
    resolve_tenant,
)


class TestExtractTenantFromPath:
    def test_with_remaining_path(self):
        assert extract_tenant_from_path("/~acme/contacts") == TenantPathMatch(
            tenant="acme", remaining_path="/contacts"
        )

    def test_tenant_only(self):
        assert extract_tenant_from_path("/~acme") == TenantPathMatch(
            tenant="acme", remaining_path="/"
        )

    def test_keeps_call_syntax_in_remaining_path(self):
        match = extract_tenant_from_path("/~acme/papa.parse(https://example.com/x.csv)")
        assert match.remaining_path == "/papa.parse(https://example.com/x.csv)"

    @pytest.mark.parametrize(
        "path", ["/contacts", "", "/", "/~", "/~/contacts", "~acme/contacts", "/~ac.me/x"]
    )
    def test_no_prefix(self, path):
        assert extract_tenant_from_path(path) is None

    def test_allows_dash_and_underscore(self):
        assert extract_tenant_from_path("/~my-org_2/x").tenant == "my-org_2"


class TestExtractTenantFromSubdomain:
    def test_tenant_subdomain(self):
        assert extract_tenant_from_subdomain("acme.headless.ly") == "acme"
        assert extract_tenant_from_subdomain("acme.workers.do") == "acme"

    def test_port_ignored(self):
        assert extract_tenant_from_subdomain("acme.headless.ly:8787") == "acme"

    @pytest.mark.parametrize(
        "host",
        [
            "localhost",
            "headless.ly",
            "api.headless.ly",
            "CRM.headless.ly",
            "a.b.headless.ly",
            "acme.example.com",
            "",
        ],
    )
    def test_not_a_tenant(self, host):
        assert extract_tenant_from_subdomain(host) is None

    def test_custom_domains(self):
        assert extract_tenant_from_subdomain("acme.example.com", ["example.com"], []) == "acme"


class TestResolveTenant:
    def test_path_wins(self):
        res = resolve_tenant(
            "/~acme/contacts",
            {"x-tenant": "other"},
            "beta.headless.ly",
            RouterConfig(),
        )
        assert res == TenantResolution(tenant="acme", source=TenantSource.PATH)

    def test_header_before_subdomain(self):
        res = resolve_tenant("/contacts", {"x-tenant": "other"}, "beta.headless.ly", RouterConfig())
        assert res == TenantResolution(tenant="other", source=TenantSource.HEADER)

    def test_custom_header(self):
        cfg = RouterConfig(tenant_header="X-Org")
        res = resolve_tenant("/contacts", {"x-org": "acme"}, "localhost", cfg)
        assert res.source is TenantSource.HEADER

    def test_subdomain(self):
        res = resolve_tenant("/contacts", {}, "beta.headless.ly", RouterConfig())
        assert res == TenantResolution(tenant="beta", source=TenantSource.SUBDOMAIN)

    def test_none(self):
        res = resolve_tenant("/contacts", {}, "localhost", RouterConfig())
        assert res == TenantResolution.unresolved()
        assert res.tenant is None
        assert res.source is TenantSource.NONE

    def test_empty_header_ignored(self):
        res = resolve_tenant("/contacts", {"x-tenant": ""}, "localhost", RouterConfig())
        assert res.source is TenantSource.NONE
