# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Runtime capabilities.

Browser-hosted interpreters (Pyodide, WASI builds) have no real local
filesystem, so reading attachments from disk is disabled there.
"""

from __future__ import annotations

import sys

BROWSER_PLATFORMS = frozenset({"emscripten", "wasi"})


def local_files_supported(platform: str | None = None) -> bool:
    """Return True when the runtime can read files from a local disk."""
    return (platform or sys.platform) not in BROWSER_PLATFORMS


LOCAL_FILES_SUPPORTED = local_files_supported()
