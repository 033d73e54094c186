"""Architecture tests using pytest-archon.

These tests enforce the boundaries between the shared kernel and
the infrastructure that wires it into an application.
"""

from pytest_archon import archrule


class TestSharedKernelBoundaries:
    """Tests that the shared kernel has no forbidden dependencies."""

    def test_shared_kernel_does_not_import_infrastructure(self):
        """Shared kernel should not depend on infrastructure.

        Settings, logging configuration and dependency wiring live in
        infrastructure and are applied from outside the kernel.
        """
        (
            archrule("shared_kernel_no_infrastructure")
            .match("shared_kernel*")
            .should_not_import("infrastructure*")
            .check("shared_kernel")
        )

    def test_datasource_does_not_import_authorization(self):
        """Data-access capabilities should not know about authorization.

        Authorization depends on the capabilities, not the other way around.
        """
        (
            archrule("datasource_no_authorization")
            .match("shared_kernel.datasource*")
            .should_not_import("shared_kernel.authorization*")
            .check("shared_kernel")
        )

    def test_policy_does_not_import_web_frameworks(self):
        """Policy resolution should be framework-agnostic."""
        (
            archrule("policy_no_frameworks")
            .match("shared_kernel.authorization*")
            .should_not_import("fastapi*", "starlette*", "flask*")
            .check("shared_kernel")
        )
