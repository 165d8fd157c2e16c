"""Per-invocation state handed to every command."""

from logctl.errors import RunError
from logctl.lib.log_lib import get_output
from logctl.registry import ContextRegistry, LogError


class Session:
    """Resolved settings plus the context registry, opened on first use.

    Commands that never touch the registry (help, klog) never open it.
    """

    def __init__(self, settings: dict, registry: ContextRegistry = None):
        self.settings = settings
        self._registry = registry

    @property
    def registry(self) -> ContextRegistry:
        if self._registry is None:
            from logctl.store import FileRegistry
            get_output().emit(1, "  [registry] Opening {path}",
                              channel='registry',
                              path=self.settings["state_file"])
            try:
                self._registry = FileRegistry(
                    state_file=self.settings["state_file"],
                    conf_file=self.settings["conf_file"],
                    log_file=self.settings["log_file"],
                    facility=self.settings["facility"],
                )
            except LogError as e:
                raise RunError.from_log_error(
                    "Error opening context registry", e) from e
        return self._registry
