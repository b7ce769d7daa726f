"""Registry address grammar.

These checks are stricter than the repository name patterns in
``identifiers``: a repository name can parse successfully and still produce an
address the registry refuses to serve (for example an upper-case target system
or an empty module name).
"""

import re

from registry_add.core.errors import AddressFormatError

# Namespace and module name: 1-64 chars, dashes and underscores only inside.
_MODULE_PART_PATTERN = re.compile(r"^[0-9A-Za-z](?:[0-9A-Za-z_-]{0,62}[0-9A-Za-z])?$")
_TARGET_SYSTEM_PATTERN = re.compile(r"^[0-9a-z]{1,64}$")
_PROVIDER_PART_CHARS = re.compile(r"^[0-9A-Za-z-]+$")

_MODULE_PART_RULES = (
    "must be between one and 64 characters, including ASCII letters, digits, "
    "dashes, and underscores, where dashes and underscores may not be the prefix or suffix"
)
_PROVIDER_PART_RULES = (
    "must contain only letters, digits, and dashes, and may not use leading or trailing dashes"
)


def validate_module_address(address: str) -> None:
    """Check a ``namespace/name/target`` module address.

    Raises:
        AddressFormatError: If any component violates the registry grammar
    """
    parts = address.split("/")
    if len(parts) != 3:
        msg = (
            f"invalid module address {address!r}: a module registry address must have "
            "three slash-separated components"
        )
        raise AddressFormatError(msg)

    namespace, name, target_system = parts
    if _MODULE_PART_PATTERN.match(namespace) is None:
        raise AddressFormatError(f"invalid namespace {namespace!r}: {_MODULE_PART_RULES}")
    if _MODULE_PART_PATTERN.match(name) is None:
        raise AddressFormatError(f"invalid module name {name!r}: {_MODULE_PART_RULES}")
    if _TARGET_SYSTEM_PATTERN.match(target_system) is None:
        msg = (
            f"invalid target system {target_system!r}: "
            "must be between one and 64 lower-case ASCII letters or digits"
        )
        raise AddressFormatError(msg)


def _provider_part_problem(part: str) -> str | None:
    if part == "":
        return "must have at least one character"
    if _PROVIDER_PART_CHARS.match(part) is None:
        return _PROVIDER_PART_RULES
    if part.startswith("-") or part.endswith("-"):
        return _PROVIDER_PART_RULES
    # Reserved by IDNA for punycode labels
    if "--" in part:
        return "cannot use multiple consecutive dashes"
    return None


def validate_provider_address(address: str) -> None:
    """Check a ``namespace/type`` provider address.

    Raises:
        AddressFormatError: If any component violates the registry grammar
    """
    parts = address.split("/")
    if len(parts) != 2:
        msg = (
            f"invalid provider source {address!r}: a provider source address must have "
            "two slash-separated components"
        )
        raise AddressFormatError(msg)

    namespace, provider_type = parts
    problem = _provider_part_problem(namespace)
    if problem is not None:
        raise AddressFormatError(f"invalid provider namespace {namespace!r}: {problem}")

    problem = _provider_part_problem(provider_type)
    if problem is not None:
        msg = f"invalid provider type {provider_type!r} in source {address!r}: {problem}"
        raise AddressFormatError(msg)

    if provider_type.startswith("terraform-"):
        msg = (
            f"invalid provider type {provider_type!r} in source {address!r}: "
            "must be a provider type name, not a full repository name"
        )
        raise AddressFormatError(msg)
