"""End-to-end directory flow: mock source -> FetchUsers -> DirectoryVM via the runtime."""

import asyncio

from userdir.adapters.api_errors import ApiTimeoutError
from userdir.adapters.user_mock import UserSourceMock
from userdir.viewmodels.directory_vm import LOAD_FAILED_MESSAGE, Phase
from userdir.viewmodels.settings_vm import SettingsConfig
from userdir.web_ui.runtime import DirectoryRuntime, build_source


async def _inline(fn, *args, **kwargs):
    return fn(*args, **kwargs)


def test_build_source_offline_uses_mock() -> None:
    assert isinstance(build_source(SettingsConfig(offline=True)), UserSourceMock)


def test_runtime_loads_browses_and_selects() -> None:
    source = UserSourceMock(count=20)
    snapshots = []
    runtime = DirectoryRuntime(
        SettingsConfig(page_size=8, stable_enrichment=True),
        source=source,
        io_bound=_inline,
        on_changed=snapshots.append,
    )

    assert asyncio.run(runtime.refresh()) is True

    snapshot = runtime.snapshot()
    assert snapshot.phase is Phase.READY
    assert snapshot.stats.total_users == 20
    assert snapshot.view.total_pages == 3
    assert len(snapshot.view.paged) == 8
    assert all(record.profile_image.endswith(f"img={record.id}") for record in snapshot.view.filtered)

    runtime.vm.goto_page(3)
    assert len(runtime.vm.view.paged) == 4
    first = runtime.vm.view.paged[0]
    assert runtime.vm.select(first.id)
    assert snapshots[-1].selection.selected == first


def test_stable_enrichment_survives_refresh() -> None:
    runtime = DirectoryRuntime(
        SettingsConfig(stable_enrichment=True), source=UserSourceMock(), io_bound=_inline
    )
    asyncio.run(runtime.refresh())
    runtime.vm.select(4)
    before = runtime.vm.selection.selected

    asyncio.run(runtime.refresh())
    after = runtime.vm.selection.selected

    assert after is not before
    assert after == before


def test_source_failure_then_retry_recovers() -> None:
    source = UserSourceMock(fail_with=ApiTimeoutError("GET /users timed out", context="test"))
    runtime = DirectoryRuntime(SettingsConfig(), source=source, io_bound=_inline)

    assert asyncio.run(runtime.refresh()) is True
    snapshot = runtime.snapshot()
    assert snapshot.phase is Phase.FAILED
    assert snapshot.error_message == LOAD_FAILED_MESSAGE
    assert snapshot.error_detail == "Request timed out. Check connection."

    asyncio.run(runtime.refresh())
    assert runtime.snapshot().phase is Phase.READY
    assert source.calls == 2


def test_superseded_refresh_is_discarded() -> None:
    gates = []

    async def gated(fn):
        gate = asyncio.Event()
        gates.append(gate)
        await gate.wait()
        return fn()

    source = UserSourceMock(count=3)
    runtime = DirectoryRuntime(SettingsConfig(), source=source, io_bound=gated)

    async def scenario():
        slow = asyncio.ensure_future(runtime.refresh())
        await asyncio.sleep(0)
        source.count = 10
        fast = asyncio.ensure_future(runtime.refresh())
        await asyncio.sleep(0)

        # Let the newer fetch finish first, then release the older one.
        gates[1].set()
        fast_applied = await fast
        gates[0].set()
        slow_applied = await slow
        return slow_applied, fast_applied

    slow_applied, fast_applied = asyncio.run(scenario())

    assert fast_applied is True
    assert slow_applied is False
    assert runtime.vm.stats.total_users == 10
    assert runtime.vm.phase is Phase.READY


def test_runner_failure_enters_failed_instead_of_hanging_in_loading() -> None:
    async def broken_runner(fn):
        raise RuntimeError("executor shut down")

    runtime = DirectoryRuntime(SettingsConfig(), source=UserSourceMock(), io_bound=broken_runner)

    assert asyncio.run(runtime.refresh()) is True

    snapshot = runtime.snapshot()
    assert snapshot.phase is Phase.FAILED
    assert snapshot.error_message == LOAD_FAILED_MESSAGE
    assert snapshot.error_detail == "executor shut down"

    runtime._io_bound = _inline
    asyncio.run(runtime.refresh())
    assert runtime.snapshot().phase is Phase.READY
