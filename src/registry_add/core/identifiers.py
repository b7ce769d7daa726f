"""Structured identifiers for registry entries.

Repository names follow the ``<owner>/terraform-<target>-<name>`` convention
for modules and ``<owner>/terraform-provider-<name>`` for providers.
"""

import re
from dataclasses import dataclass

from registry_add.core.errors import ParseError

_MODULE_REPOSITORY_PATTERN = re.compile(
    r"(?P<namespace>[a-zA-Z0-9]+)/terraform-(?P<target>[a-zA-Z0-9]*)-(?P<name>[a-zA-Z0-9-]*)"
)
_PROVIDER_REPOSITORY_PATTERN = re.compile(
    r"(?P<namespace>[a-zA-Z0-9]+)/terraform-provider-(?P<name>[a-zA-Z0-9-]*)"
)


@dataclass(frozen=True)
class RepositoryRef:
    """A GitHub repository, e.g. ``hashicorp/terraform-aws-vpc``."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.name}"


@dataclass(frozen=True)
class ModuleIdentifier:
    namespace: str
    name: str
    target_system: str

    @property
    def repository(self) -> RepositoryRef:
        return RepositoryRef(self.namespace, f"terraform-{self.target_system}-{self.name}")

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}/{self.target_system}"


@dataclass(frozen=True)
class ProviderIdentifier:
    namespace: str
    provider_name: str

    @property
    def repository(self) -> RepositoryRef:
        return RepositoryRef(self.namespace, f"terraform-provider-{self.provider_name}")

    def __str__(self) -> str:
        return f"{self.namespace}/{self.provider_name}"


def parse_module_repository(repository: str) -> ModuleIdentifier:
    """Parse a module repository name into a ModuleIdentifier.

    Matching is case-sensitive and the captured segments keep their case.

    Examples:
        >>> parse_module_repository("hashicorp/terraform-aws-vpc")
        ModuleIdentifier(namespace='hashicorp', name='vpc', target_system='aws')

    Raises:
        ParseError: If the name does not follow the module naming convention
    """
    match = _MODULE_REPOSITORY_PATTERN.fullmatch(repository)
    if match is None:
        raise ParseError(f"Invalid repository name: {repository}")

    return ModuleIdentifier(
        namespace=match.group("namespace"),
        name=match.group("name"),
        target_system=match.group("target"),
    )


def parse_provider_repository(repository: str) -> ProviderIdentifier:
    """Parse a provider repository name into a ProviderIdentifier.

    Unlike modules, the whole name is lower-cased before matching.

    Examples:
        >>> parse_provider_repository("HashiCorp/terraform-provider-AWS")
        ProviderIdentifier(namespace='hashicorp', provider_name='aws')

    Raises:
        ParseError: If the name does not follow the provider naming convention
    """
    match = _PROVIDER_REPOSITORY_PATTERN.fullmatch(repository.lower())
    if match is None:
        raise ParseError(f"Invalid repository name: {repository}")

    return ProviderIdentifier(
        namespace=match.group("namespace"),
        provider_name=match.group("name"),
    )
