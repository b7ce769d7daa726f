"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from registry_add.core.catalog.abc import Catalog
from registry_add.core.catalog.real import ModuleCatalog, ProviderCatalog
from registry_add.core.config import AppConfig
from registry_add.core.github.abc import GitHub
from registry_add.core.github.real import RealGitHub
from registry_add.core.identifiers import ModuleIdentifier, ProviderIdentifier
from registry_add.core.submission import ModuleSubmission, ProviderSubmission


@dataclass(frozen=True)
class AppContext:
    """Immutable context holding all dependencies for one submission.

    Created at CLI entry point and passed to the pipeline.
    """

    github: GitHub
    modules: Catalog[ModuleIdentifier, ModuleSubmission]
    providers: Catalog[ProviderIdentifier, ProviderSubmission]

    @staticmethod
    def for_test(
        github: GitHub | None = None,
        modules: Catalog[ModuleIdentifier, ModuleSubmission] | None = None,
        providers: Catalog[ProviderIdentifier, ProviderSubmission] | None = None,
    ) -> "AppContext":
        """Create test context, filling unspecified dependencies with empty fakes.

        Example:
            >>> github = FakeGitHub(tags={"hashicorp/terraform-aws-vpc": ["v1.0.0"]})
            >>> ctx = AppContext.for_test(github=github)
        """
        from registry_add.core.catalog.fake import FakeModuleCatalog, FakeProviderCatalog
        from registry_add.core.github.fake import FakeGitHub

        if github is None:
            github = FakeGitHub()

        if modules is None:
            modules = FakeModuleCatalog()

        if providers is None:
            providers = FakeProviderCatalog()

        return AppContext(github=github, modules=modules, providers=providers)


def create_context(config: AppConfig, *, module_data: Path, provider_data: Path) -> AppContext:
    """Create production context with real implementations."""
    return AppContext(
        github=RealGitHub(config.github_token),
        modules=ModuleCatalog(module_data),
        providers=ProviderCatalog(provider_data),
    )
