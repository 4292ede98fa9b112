"""
Mobile app bootstrap: register installed plugins, then continue launch
"""
import logging
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, Iterable, List, Optional

from emergency_alerts.constants import PLUGIN_ENTRY_POINT_GROUP

logger = logging.getLogger(__name__)

Plugin = Callable[[Any], None]


class PluginRegistrant:
    """Registers plugins from entry points plus any passed in explicitly"""

    def __init__(self, plugins: Optional[Dict[str, Plugin]] = None,
                 group: str = PLUGIN_ENTRY_POINT_GROUP):
        self.plugins = dict(plugins or {})
        self.group = group

    def discover(self) -> Dict[str, Plugin]:
        """Installed entry-point plugins, explicit ones take precedence"""
        found = {ep.name: ep.load() for ep in entry_points(group=self.group)}
        found.update(self.plugins)
        return found

    def register(self, registry: Any) -> List[str]:
        """Call every plugin with the registry, return their names"""
        registered = []
        for name, plugin in sorted(self.discover().items()):
            plugin(registry)
            registered.append(name)

        logger.info(f"Registered {len(registered)} plugin(s): {registered}")
        return registered


class Application:
    """Default launch continuation"""

    def application_did_finish_launching(self, launch_options: Optional[Dict[str, Any]] = None) -> bool:
        return True


class AppDelegate(Application):
    """Launch hook: plugins first, then the default launch"""

    def __init__(self, registrant: Optional[PluginRegistrant] = None):
        self.registrant = registrant or PluginRegistrant()
        self.registered: Iterable[str] = ()

    def application_did_finish_launching(self, launch_options: Optional[Dict[str, Any]] = None) -> bool:
        # launch_options are opaque here
        self.registered = self.registrant.register(self)
        return super().application_did_finish_launching(launch_options)
