# core/frozen.py
from core.errors import SceneFrozenError


class Freezable:
    """
    Mixin for scene members that may be mutated while a scene is being
    built and must stay read-only once rendering starts.
    """
    _frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        self._frozen = True
        return self

    def _check_mutable(self, what: str):
        if self._frozen:
            raise SceneFrozenError(f"cannot change {what} of {type(self).__name__} after freeze()")
