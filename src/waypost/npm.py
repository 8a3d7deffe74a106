"""npm dependency tagging.

Python classes that back a frontend feature declare the npm package the
feature needs. The frontend build collects the tags into ``package.json``::

    @npm_package("@waypost/react-form", "0.1.0")
    class ReactForm:
        pass

    collect_npm_packages([ReactForm])  # {"@waypost/react-form": "0.1.0"}
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from waypost.errors import ConfigurationError

_PACKAGES_ATTR = "__npm_packages__"


@dataclass(frozen=True, slots=True)
class NpmPackage:
    name: str
    version: str


def npm_package(name: str, version: str) -> Callable[[type[Any]], type[Any]]:
    """Tag a class with an npm dependency. Stackable."""

    def decorator(cls: type[Any]) -> type[Any]:
        declared = vars(cls).get(_PACKAGES_ATTR, ())
        setattr(cls, _PACKAGES_ATTR, (NpmPackage(name, version), *declared))
        return cls

    return decorator


def npm_packages(cls: type[Any]) -> tuple[NpmPackage, ...]:
    """Packages declared directly on *cls*, in source order."""
    return vars(cls).get(_PACKAGES_ATTR, ())


def collect_npm_packages(classes: Iterable[type[Any]]) -> dict[str, str]:
    """Merge the packages declared on *classes* into ``{name: version}``.

    Raises ``ConfigurationError`` when two classes pin the same package
    to different versions.
    """
    collected: dict[str, str] = {}
    owners: dict[str, str] = {}
    for cls in classes:
        for package in npm_packages(cls):
            current = collected.get(package.name)
            if current is not None and current != package.version:
                msg = (
                    f"npm package {package.name!r} is pinned to {current} by "
                    f"{owners[package.name]} and to {package.version} by {cls.__qualname__}."
                )
                raise ConfigurationError(msg)
            collected[package.name] = package.version
            owners[package.name] = cls.__qualname__
    return collected


@npm_package("@waypost/react-form", "0.1.0")
class ReactForm:
    """Empty class that adds the ``@waypost/react-form`` npm dependency."""
