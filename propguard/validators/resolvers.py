"""Value resolvers — where the value under validation comes from.

A resolver is any zero-argument callable returning the value, or None when
it is absent. Resolvers may raise; the validator never catches their errors.
Source-specific resolvers (runtime version detection, build metadata) belong
to the caller.
"""

from typing import Any, Callable, Mapping, Optional

ValueResolver = Callable[[], Any]


def fixed(value: Optional[str]) -> ValueResolver:
    """Resolver that always returns ``value``."""
    return lambda: value


def from_mapping(mapping: Mapping[str, Any], key: str) -> ValueResolver:
    """Resolver that looks ``key`` up in ``mapping`` at resolution time.

    A missing key resolves to None. The lookup is deferred, so later changes
    to a mutable mapping (e.g. ``os.environ``) are observed.
    """

    def resolve() -> Any:
        return mapping.get(key)

    return resolve
