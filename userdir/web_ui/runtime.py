"""Composition root for the NiceGUI directory page.

Wires settings -> user source adapter -> ``FetchUsers`` -> ``DirectoryVM`` and
runs fetches off the event loop. Each refresh is tagged with the view-model's
fetch token, so a slow response that finishes after a newer refresh is
dropped instead of overwriting fresher data.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

from userdir.adapters.user_mock import UserSourceMock
from userdir.adapters.user_rest import UserRestAdapter
from userdir.domain.enrichment import Enricher
from userdir.domain.ports import UserSourcePort
from userdir.usecases.error_mapping import map_api_error
from userdir.usecases.fetch_users import FetchUsers
from userdir.viewmodels.directory_vm import DirectorySnapshot, DirectoryVM
from userdir.viewmodels.settings_vm import SettingsConfig

IoBound = Callable[..., Awaitable[Any]]


def build_source(settings: SettingsConfig) -> UserSourcePort:
    """Return the HTTP adapter, or the offline mock when ``settings.offline``."""
    if settings.offline:
        return UserSourceMock()
    return UserRestAdapter(
        settings.api_base_url,
        users_path=settings.users_path,
        api_key=settings.api_key,
        request_timeout_s=settings.request_timeout_s,
        retries=settings.retries,
    )


class DirectoryRuntime:
    """Orchestration state used by the NiceGUI page."""

    def __init__(
        self,
        settings: Optional[SettingsConfig] = None,
        *,
        source: Optional[UserSourcePort] = None,
        io_bound: Optional[IoBound] = None,
        on_changed: Optional[Callable[[DirectorySnapshot], None]] = None,
    ) -> None:
        self.settings = settings or SettingsConfig()
        self.source = source or build_source(self.settings)
        self.uc_fetch_users = FetchUsers(
            self.source,
            enrich=Enricher(
                avatar_base_url=self.settings.avatar_base_url,
                stable=self.settings.stable_enrichment,
            ),
        )
        self.vm = DirectoryVM(on_changed=on_changed, page_size=self.settings.page_size)
        self._io_bound: IoBound = io_bound or asyncio.to_thread

    async def refresh(self) -> bool:
        """Fetch users without blocking the UI loop.

        Returns:
            True when this call's result was applied, False when a newer
            refresh superseded it.
        """
        token = self.vm.begin_refresh()
        try:
            records = await self._io_bound(self.uc_fetch_users)
        except Exception as exc:
            return self.vm.apply_failure(token, map_api_error(exc, default_code="FETCH_FAILED"))
        return self.vm.apply_records(token, records)

    def snapshot(self) -> DirectorySnapshot:
        return self.vm.snapshot()


__all__ = ["DirectoryRuntime", "build_source"]
