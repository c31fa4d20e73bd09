from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from directrix.model.site import Site

logger = logging.getLogger(__name__)


class SiteStore(QObject):
    """
    Single owner of the mutable site.

    Pointer handlers write through ``set_focus``/``set_directrix``; the paint
    handler reads ``site``. All access happens on the Qt event loop thread,
    which delivers events one at a time. ``site_changed`` is the redraw
    request.
    """
    site_changed = Signal(object)

    def __init__(self, site: Site) -> None:
        super().__init__()
        self._site = site

    @property
    def site(self) -> Site:
        return self._site

    def set_focus(self, x: float, y: float) -> None:
        self._site.set_focus(x, y)
        self.site_changed.emit(self._site)

    def set_directrix(self, y: float) -> None:
        self._site.set_directrix(y)
        self.site_changed.emit(self._site)
