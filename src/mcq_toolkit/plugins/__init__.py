"""
Module: plugins

Purpose:
    Registry of platform templates used by the platform strategy.
    Built-in templates (Google Forms, Quizlet, Canvas) are registered on
    first access; callers add their own with register_platform().

Key Classes:
    - PlatformTemplate: Name, detection predicate and extractor

Key Functions:
    - register_platform() / unregister_platform()
    - get_platform(), registered_platforms()

Used By:
    - extractor.structured.platforms: Dispatches to registered templates
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from mcq_toolkit.core.errors import MCQToolkitError

if TYPE_CHECKING:
    from mcq_toolkit.core.models import MCQ
    from mcq_toolkit.extractor.config import ExtractionConfig
    from mcq_toolkit.extractor.tree.nodes import DocumentTree

logger = logging.getLogger(__name__)


class DuplicatePlatformError(MCQToolkitError):
    """Raised when a platform name is registered twice."""


class UnknownPlatformError(MCQToolkitError):
    """Raised when a platform name is not registered."""


@dataclass(frozen=True)
class PlatformTemplate:
    """
    Extraction template for a known quiz platform.

    Attributes:
        name: Unique platform name, recorded on each MCQ it produces.
        matches: ``matches(tree) -> bool``, whether the document belongs
            to this platform.
        extract: ``extract(tree, config) -> list[MCQ]``.
    """
    name: str
    matches: Callable[["DocumentTree"], bool]
    extract: Callable[["DocumentTree", "ExtractionConfig"], List["MCQ"]]

    def try_extract(self, tree: "DocumentTree", config: "ExtractionConfig") -> List["MCQ"]:
        return list(self.extract(tree, config))


# Lazy initialization: built-ins are registered on first access
_PLATFORMS: Dict[str, PlatformTemplate] = {}
_INITIALIZED = False


def _ensure_initialized() -> None:
    global _INITIALIZED
    if not _INITIALIZED:
        _INITIALIZED = True
        from mcq_toolkit.plugins.builtin import BUILTIN_PLATFORMS

        for template in BUILTIN_PLATFORMS:
            _PLATFORMS.setdefault(template.name, template)


def register_platform(template: PlatformTemplate, *, replace: bool = False) -> None:
    """
    Register a platform template.

    Templates run in registration order; built-ins come first.

    Raises:
        DuplicatePlatformError: If the name is taken and ``replace`` is False.
    """
    _ensure_initialized()
    if template.name in _PLATFORMS and not replace:
        raise DuplicatePlatformError(f"Platform already registered: {template.name}")
    _PLATFORMS[template.name] = template
    logger.debug(f"Registered platform template {template.name!r}")


def unregister_platform(name: str) -> Optional[PlatformTemplate]:
    """Remove a template; returns it, or None if it was not registered."""
    _ensure_initialized()
    return _PLATFORMS.pop(name, None)


def get_platform(name: str) -> PlatformTemplate:
    _ensure_initialized()
    template = _PLATFORMS.get(name)
    if template is None:
        raise UnknownPlatformError(f"Unknown platform: {name}")
    return template


def registered_platforms() -> List[PlatformTemplate]:
    """Registered templates in registration order."""
    _ensure_initialized()
    return list(_PLATFORMS.values())
