# SPDX-License-Identifier: MIT
"""Well-known package.json field names.

The standard section list follows the npm package.json reference
(https://docs.npmjs.com/cli/v8/configuring-npm/package-json), minus the
fields that only matter in the source tree (scripts, devDependencies) and the
entry points that are always supplied by the caller (main, types).
"""

from __future__ import annotations

MANIFEST_FILENAME = "package.json"

# Fields that survive into the published manifest, in output order
STANDARD_SECTIONS: tuple[str, ...] = (
    "name",
    "version",
    "description",
    "keywords",
    "homepage",
    "bugs",
    "license",
    "author",
    "contributors",
    "funding",
    "files",
    "exports",
    "module",
    "typesVersions",
    "browser",
    "bin",
    "man",
    "directories",
    "repository",
    "config",
    "dependencies",
    "peerDependencies",
    "peerDependenciesMeta",
    "bundleDependencies",
    "optionalDependencies",
    "overrides",
    "engines",
    "os",
    "cpu",
    "private",
    "publishConfig",
)

# Entry points replaced by the caller's values
OVERRIDE_SECTIONS: tuple[str, ...] = ("main", "types")

# Top-level string fields rewritten when a strip prefix is given
STRIP_STRING_SECTIONS: tuple[str, ...] = ("main", "types", "module")

# Nested fields whose string leaves are rewritten when a strip prefix is given
STRIP_NESTED_SECTIONS: tuple[str, ...] = ("typesVersions", "exports")
