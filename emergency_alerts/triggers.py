"""
Document-creation triggers as explicit registrations

Handlers are plain functions (params, document) -> result, so they can be
driven directly in tests or by any event source.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

CreateHandler = Callable[[Dict[str, str], Optional[Mapping[str, Any]]], Any]

_WILDCARD = re.compile(r'^\{(\w+)\}$')


class DocumentPath:
    """Path pattern such as 'emergency_alerts/{alertId}'"""

    def __init__(self, pattern: str):
        segments = pattern.strip('/').split('/')
        if not pattern.strip('/') or any(not s for s in segments):
            raise ValueError(f"Invalid document path pattern: {pattern!r}")

        self.pattern = pattern
        self.segments: List[Tuple[bool, str]] = []
        for segment in segments:
            wildcard = _WILDCARD.match(segment)
            if wildcard:
                self.segments.append((True, wildcard.group(1)))
            else:
                self.segments.append((False, segment))

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Return wildcard params if path matches, else None"""
        parts = path.strip('/').split('/')
        if len(parts) != len(self.segments):
            return None

        params = {}
        for part, (is_wildcard, value) in zip(parts, self.segments):
            if not part:
                return None
            if is_wildcard:
                params[value] = part
            elif part != value:
                return None
        return params

    def __repr__(self):
        return f"DocumentPath({self.pattern!r})"


@dataclass
class Registration:
    path: DocumentPath
    handler: CreateHandler


@dataclass
class TriggerRegistry:
    """Registry of on-create handlers keyed by document path pattern"""
    registrations: List[Registration] = field(default_factory=list)

    def on_create(self, pattern: str) -> Callable[[CreateHandler], CreateHandler]:
        """Decorator registering handler for documents created under pattern"""
        path = DocumentPath(pattern)

        def decorator(handler: CreateHandler) -> CreateHandler:
            self.registrations.append(Registration(path=path, handler=handler))
            logger.debug(f"Registered {handler.__name__} for {pattern}")
            return handler

        return decorator

    def dispatch_created(self, path: str, document: Optional[Mapping[str, Any]]) -> List[Any]:
        """Invoke every handler whose pattern matches path"""
        results = []
        for registration in self.registrations:
            params = registration.path.match(path)
            if params is None:
                continue
            results.append(registration.handler(params, document))

        if not results:
            logger.debug(f"No trigger registered for {path}")
        return results
