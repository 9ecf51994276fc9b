"""
Registries of platform built-in module names.

A registry answers whether a base module name belongs to the platform
(e.g. ``fs`` on Node.js, ``os`` on Python). The import classifier only
consults a registry for imports that did not resolve to a project file.
"""

from __future__ import annotations

import sys
from typing import Protocol

NODE_PREFIX = "node:"

# Node.js core modules importable without installing anything
NODE_CORE_MODULES = frozenset(
    {
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

# Only importable with the "node:" prefix
NODE_PREFIX_ONLY_MODULES = frozenset({"sea", "sqlite", "test", "test/reporters"})


class BuiltinRegistry(Protocol):
    """Anything that can tell whether a module name is a platform built-in."""

    def is_builtin(self, name: str) -> bool: ...


class NodeCoreModules:
    """Node.js core modules, with or without the ``node:`` prefix."""

    def __init__(self, modules: frozenset[str] = NODE_CORE_MODULES) -> None:
        self.modules = modules

    def is_builtin(self, name: str) -> bool:
        if not name:
            return False
        if name.startswith(NODE_PREFIX):
            bare = name[len(NODE_PREFIX) :]
            return bare in self.modules or bare in NODE_PREFIX_ONLY_MODULES
        return name in self.modules


class PythonStdlibModules:
    """
    Python standard library modules of the running interpreter.

    Dotted names are reduced to their top-level package, so ``os.path``
    counts as built-in.
    """

    def __init__(self) -> None:
        self._stdlib_modules: set[str] | None = None

    def get_stdlib_modules(self) -> set[str]:
        """Get (and cache) the set of standard library module names."""
        if self._stdlib_modules is None:
            self._stdlib_modules = set(sys.stdlib_module_names) | set(sys.builtin_module_names)
        return self._stdlib_modules

    def is_builtin(self, name: str) -> bool:
        if not name:
            return False
        return name.split(".")[0] in self.get_stdlib_modules()


REGISTRIES = {
    "node": NodeCoreModules,
    "python": PythonStdlibModules,
}


def get_registry(platform: str) -> BuiltinRegistry:
    """
    Create the built-in registry for a platform name.

    Raises:
        ValueError: If the platform is unknown
    """
    try:
        return REGISTRIES[platform.lower()]()
    except KeyError as err:
        raise ValueError(
            f"Unknown platform: {platform} (expected one of: {', '.join(REGISTRIES)})"
        ) from err
