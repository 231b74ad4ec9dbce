"""
Diagnostics for the section renderer.

Block-level problems are reported through a diagnostics object chosen when the
renderer is built: in development they are logged, in production they are
dropped. A new diagnostics object is made for every render pass, so repeated
warnings are collapsed within one pass only.
"""

import logging
from typing import Set


class RenderDiagnostics:
    """
    Logs block-level warnings and errors, each warning key at most once.
    """
    
    def __init__(self):
        self._seen: Set[str] = set()

    def warn_once(self, key: str, message: str) -> bool:
        """
        Log a warning unless one with the same key was already logged.
        
        Args:
            key: Composite of failure reason and block position or kind
            message: The warning text
            
        Returns:
            True if the warning was logged
        """
        if key in self._seen:
            return False
        self._seen.add(key)
        logging.warning(f"[sections] {message}")
        return True

    def error(self, message: str) -> None:
        logging.error(f"[sections] {message}")


class NullDiagnostics(RenderDiagnostics):
    """Diagnostics that report nothing."""

    def warn_once(self, key: str, message: str) -> bool:
        return False

    def error(self, message: str) -> None:
        pass
