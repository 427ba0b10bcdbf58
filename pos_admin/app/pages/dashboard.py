from __future__ import annotations

from pos_admin.app.navigation import EXIT_OPTION, LOGOUT_OPTION, SIDEBAR, Route, resolve_option
from pos_admin.app.pages.console import PageContext


def render_sidebar(context: PageContext) -> None:
    console = context.console
    console.say("\n=== POS Admin ===")
    for entry in SIDEBAR:
        console.say(f"  {entry.option}. {entry.label}")
    console.say(f"  {LOGOUT_OPTION}. Log out")
    console.say(f"  {EXIT_OPTION}. Exit")


class DashboardPage:
    def __init__(self, context: PageContext) -> None:
        self.context = context

    async def run(self) -> None:
        if not self.context.guard.require_session(Route.DASHBOARD):
            return
        render_sidebar(self.context)
        option = await self.context.console.ask("Option: ")
        if option == LOGOUT_OPTION:
            self.context.guard.logout()
            self.context.console.say("[success] Logged out.")
            return
        if option == EXIT_OPTION:
            self.context.navigator.go(Route.EXIT)
            return
        entry = resolve_option(option)
        if entry is None:
            self.context.console.say("[error] Invalid option.")
            return
        self.context.navigator.go(entry.route)
