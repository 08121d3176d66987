"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within each bounded context, and keep the shared kernel independent.
"""

import pytest
from pytest_archon import archrule

BOUNDED_CONTEXTS = ["routing", "tenancy", "auth", "activation"]


class TestDomainLayerBoundaries:
    """Tests that domain layers have no forbidden dependencies."""

    @pytest.mark.parametrize("context", BOUNDED_CONTEXTS)
    def test_domain_does_not_import_infrastructure(self, context: str):
        """Domain layer should not depend on infrastructure.

        The domain layer contains pure business logic and should not
        know about HTTP clients or cookies.
        """
        (
            archrule(f"{context}_domain_no_infrastructure")
            .match(f"{context}.domain*")
            .should_not_import(f"{context}.infrastructure*", f"{context}.presentation*")
            .check(context)
        )

    @pytest.mark.parametrize("context", BOUNDED_CONTEXTS)
    def test_domain_does_not_import_frameworks(self, context: str):
        """Domain objects should be framework-agnostic."""
        (
            archrule(f"{context}_domain_no_frameworks")
            .match(f"{context}.domain*")
            .should_not_import("fastapi*", "starlette*", "httpx*")
            .check(context)
        )


class TestPortsLayerBoundaries:
    """Tests that ports do not know their implementations."""

    @pytest.mark.parametrize("context", ["tenancy", "auth", "activation"])
    def test_ports_do_not_import_infrastructure(self, context: str):
        """Ports define interfaces; they should not know about adapters."""
        (
            archrule(f"{context}_ports_no_infrastructure")
            .match(f"{context}.ports*")
            .should_not_import(f"{context}.infrastructure*")
            .check(context)
        )


class TestApplicationLayerBoundaries:
    """Tests that application services depend on ports, not adapters."""

    @pytest.mark.parametrize("context", ["auth", "activation"])
    def test_application_does_not_import_infrastructure(self, context: str):
        """Application services should be wired to adapters from outside."""
        (
            archrule(f"{context}_application_no_infrastructure")
            .match(f"{context}.application*")
            .should_not_import(f"{context}.infrastructure*", "httpx*", "fastapi*")
            .check(context)
        )


class TestSharedKernelBoundaries:
    """Tests that the shared kernel does not depend on bounded contexts."""

    def test_shared_kernel_does_not_import_bounded_contexts(self):
        """The shared kernel is imported by contexts, never the reverse."""
        (
            archrule("shared_kernel_independent")
            .match("shared_kernel*")
            .should_not_import("routing*", "tenancy*", "auth*", "activation*")
            .check("shared_kernel")
        )
