"""NiceGUI entrypoint for the user directory page."""

from __future__ import annotations

import argparse
import logging

from nicegui import run, ui

from userdir.domain.entities import UserRecord
from userdir.domain.pagination import PAGE_GAP
from userdir.domain.sorting import SORT_OPTIONS
from userdir.utils import logging as logging_utils
from userdir.viewmodels import display_format as fmt
from userdir.viewmodels.directory_vm import DirectorySnapshot, Phase
from userdir.viewmodels.settings_vm import SettingsConfig
from userdir.web_ui.runtime import DirectoryRuntime


def _install_theme() -> None:
    """Install global CSS tokens for the directory page."""
    ui.add_head_html(
        """
<style>
.udir-page { max-width: 1280px; margin: 0 auto; padding: 16px; }
.udir-card { cursor: pointer; width: 290px; }
.udir-muted { color: #64748b; font-size: 13px; }
.udir-stat { min-width: 140px; }
</style>
        """
    )


def _user_card(record: UserRecord, runtime: DirectoryRuntime) -> None:
    with ui.card().classes("udir-card").on("click", lambda _e, key=record.id: runtime.vm.select(key)):
        with ui.row().classes("items-center no-wrap"):
            ui.image(record.profile_image).classes("w-14 h-14 rounded-full")
            with ui.column().classes("gap-0"):
                ui.label(record.name).classes("text-subtitle1 text-weight-medium")
                ui.label(f"@{record.username}").classes("udir-muted")
        ui.label(record.email)
        ui.label(record.phone).classes("udir-muted")
        ui.link(record.website, fmt.website_url(record.website), new_tab=True)
        ui.label(record.company.name).classes("text-weight-medium")
        ui.label(record.company.catch_phrase).classes("udir-muted")
        ui.label(fmt.address_label(record, city_first=True)).classes("udir-muted")
        with ui.row().classes("justify-between w-full"):
            ui.label(f"{record.posts} posts")
            ui.label(f"{fmt.compact_count(record.followers)} followers")
            ui.label(f"{record.following} following")
        ui.label(f"Joined: {record.join_date} · ID: {record.id}").classes("udir-muted")


def _detail_dialog(record: UserRecord, runtime: DirectoryRuntime) -> None:
    with ui.dialog(value=True).on("hide", lambda _e: runtime.vm.close_detail()), ui.card().classes("min-w-[420px]"):
        with ui.row().classes("items-center justify-between w-full"):
            ui.label("User Details").classes("text-h6")
            ui.button(icon="close", on_click=runtime.vm.close_detail).props("flat round")
        with ui.row().classes("items-center"):
            ui.image(record.profile_image).classes("w-20 h-20 rounded-full")
            with ui.column().classes("gap-0"):
                ui.label(record.name).classes("text-h6")
                ui.label(f"@{record.username}").classes("udir-muted")
        with ui.grid(columns=2):
            ui.label("Email:")
            ui.label(record.email)
            ui.label("Phone:")
            ui.label(record.phone)
            ui.label("Website:")
            ui.link(record.website, fmt.website_url(record.website), new_tab=True)
            ui.label("Company:")
            ui.label(record.company.name)
            ui.label("Catchphrase:")
            ui.label(record.company.catch_phrase)
            ui.label("Address:")
            ui.label(fmt.address_label(record))
        with ui.row().classes("justify-between w-full"):
            ui.label(f"{record.posts} posts")
            ui.label(f"{fmt.grouped_count(record.followers)} followers")
            ui.label(f"{record.following} following")
            ui.label(f"Joined {record.join_date}")


def _pager(snapshot: DirectorySnapshot, runtime: DirectoryRuntime) -> None:
    view = snapshot.view
    with ui.row().classes("items-center justify-center w-full"):
        ui.button("← Previous", on_click=runtime.vm.previous_page).props(
            "flat" + (" disable" if not view.has_previous else "")
        )
        for entry in view.page_window:
            if entry == PAGE_GAP:
                ui.label(PAGE_GAP)
                continue
            button = ui.button(str(entry), on_click=lambda _e, page=entry: runtime.vm.goto_page(page))
            if entry != view.current_page:
                button.props("outline")
        ui.button("Next →", on_click=runtime.vm.next_page).props(
            "flat" + (" disable" if not view.has_next else "")
        )


def _build_ui(settings: SettingsConfig) -> None:
    """Register the NiceGUI page; every client gets its own runtime."""

    @ui.page("/")
    def index() -> None:
        _install_theme()

        @ui.refreshable
        def content() -> None:
            snapshot = runtime.snapshot()
            if snapshot.phase is Phase.LOADING:
                with ui.column().classes("items-center w-full"):
                    ui.spinner(size="xl")
                    ui.label("Loading Users")
                return
            if snapshot.phase is Phase.FAILED:
                with ui.card().classes("items-center w-full"):
                    ui.label("Oops! Something went wrong").classes("text-h6")
                    ui.label(snapshot.error_message)
                    if snapshot.error_detail:
                        ui.label(snapshot.error_detail).classes("udir-muted")
                    ui.button("Retry", icon="refresh", on_click=runtime.refresh)
                return

            stats = snapshot.stats
            with ui.row():
                for value, label in (
                    (stats.total_users, "Total Users"),
                    (stats.cities, "Cities"),
                    (stats.companies, "Companies"),
                ):
                    with ui.card().classes("udir-stat items-center"):
                        ui.label(str(value)).classes("text-h5")
                        ui.label(label).classes("udir-muted")

            view = snapshot.view
            ui.label(fmt.results_hint(view.result_count)).classes("udir-muted")
            if view.paged:
                with ui.row().classes("w-full"):
                    for record in view.paged:
                        _user_card(record, runtime)
            else:
                with ui.column().classes("items-center w-full"):
                    ui.label("No users found").classes("text-h6")
                    ui.label("Try adjusting your search criteria").classes("udir-muted")
                    ui.button("Clear Search", on_click=lambda: search.set_value(""))

            if view.show_pager:
                _pager(snapshot, runtime)
            ui.label(fmt.footer_label(len(view.paged), view.result_count, view.search_term)).classes(
                "udir-muted"
            )
            if snapshot.selection.detail_visible and snapshot.selection.selected is not None:
                _detail_dialog(snapshot.selection.selected, runtime)

        def on_changed(snapshot: DirectorySnapshot) -> None:
            if snapshot.phase is Phase.READY and search.value != snapshot.view.search_term:
                search.set_value(snapshot.view.search_term)
            content.refresh()

        runtime = DirectoryRuntime(settings, io_bound=run.io_bound, on_changed=on_changed)

        with ui.column().classes("udir-page w-full"):
            ui.label("User Directory").classes("text-h4")
            ui.label("Discover and connect with users from around the world").classes("udir-muted")
            with ui.row().classes("items-center w-full"):
                search = ui.input(
                    placeholder="Search users by name, email, or company...",
                    on_change=lambda e: runtime.vm.set_search_term(e.value),
                ).props("clearable").classes("grow")
                ui.select(
                    dict(SORT_OPTIONS),
                    value=runtime.vm.view.sort_key,
                    label="Sort by",
                    on_change=lambda e: runtime.vm.set_sort_key(e.value),
                )
                ui.button("Refresh", icon="refresh", on_click=runtime.refresh)
            content()

        ui.timer(0.1, runtime.refresh, once=True)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the user directory NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--offline", action="store_true", help="serve generated users instead of the API")
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    level = logging_utils.configure_root()
    logging.getLogger(__name__).info("Effective web UI log level: %s", logging_utils.level_name(level))
    settings = SettingsConfig.from_env()
    if args.offline:
        settings = settings.apply({"offline": True})
    _build_ui(settings)
    ui.run(host=args.host, port=args.port, title="User Directory", reload=args.reload, show=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
