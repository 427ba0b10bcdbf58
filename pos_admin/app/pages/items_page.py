from __future__ import annotations

from pos_admin.app.error_presenter import build_error_payload, print_error_banner
from pos_admin.app.forms import ItemDraft
from pos_admin.app.gateways import build_items_controller
from pos_admin.app.navigation import Route
from pos_admin.app.pages.console import Console, PageContext, print_field_errors
from pos_admin.app.resource_controller import MutationResult, MutationStatus, ResourceListController
from pos_admin.app.state import LoadState
from pos_admin.app.table_printer import ITEM_COLUMNS, item_row, print_table
from pos_admin.clients.pos_sdk.attachments import ImageAttachment
from pos_admin.clients.pos_sdk.models import Item

MENU = "[a]dd [u]pdate [d]elete [n]ext [p]rev [r]efresh [b]ack: "


def render_items(controller: ResourceListController[Item, ItemDraft], console: Console, base_url: str) -> None:
    page = controller.page
    if page.status == LoadState.LOADING:
        console.say("[loading] Loading...")
        return
    if page.status == LoadState.FAILED:
        console.say(f"[error] {page.error}")
        return
    print_table(
        f"Items (page {page.page_number})",
        [item_row(item, base_url) for item in page.items],
        ITEM_COLUMNS,
    )


def report_mutation(console: Console, result: MutationResult) -> None:
    if result.status == MutationStatus.VALIDATION_FAILED:
        print_field_errors(console, result.field_errors)
        print_error_banner(build_error_payload(None, result.field_errors))
    elif result.status == MutationStatus.BLOCKED:
        console.say(f"[blocked] {result.message}")


async def read_image(console: Console) -> ImageAttachment | None:
    path = await console.ask("Image file path: ")
    if not path:
        return None
    try:
        return ImageAttachment.from_path(path)
    except OSError as exc:
        console.say(f"[error] Could not read image: {exc}")
        return None


async def fill_item_draft(console: Console, draft: ItemDraft) -> ItemDraft:
    def _hint(value: str) -> str:
        return f" [{value}]" if value else ""

    draft.name = await console.ask(f"Name{_hint(draft.name)}: ") or draft.name
    draft.price = await console.ask(f"Price{_hint(draft.price)}: ") or draft.price
    draft.stock = await console.ask(f"Stock{_hint(draft.stock)}: ") or draft.stock
    draft.category = await console.ask(f"Category{_hint(draft.category)}: ") or draft.category
    draft.image = await read_image(console)
    return draft


def find_item(controller: ResourceListController[Item, ItemDraft], item_id: str) -> Item | None:
    return next((item for item in controller.page.items if item.id == item_id.strip()), None)


class ItemsPage:
    def __init__(self, context: PageContext) -> None:
        self.context = context

    async def run(self) -> None:
        context = self.context
        if not context.guard.require_session(Route.ITEMS):
            return
        controller = build_items_controller(context.api, context.navigator, context.notifications, context.page_size)
        console = context.console
        await controller.mount()
        try:
            while context.navigator.current == Route.ITEMS:
                render_items(controller, console, context.base_url)
                choice = (await console.ask(MENU)).lower()
                if choice == "b":
                    context.navigator.go(Route.DASHBOARD)
                elif choice == "r":
                    await controller.refresh()
                elif choice == "n":
                    await controller.load(page_number=controller.page.page_number + 1)
                elif choice == "p":
                    await controller.load(page_number=controller.page.page_number - 1)
                elif choice == "a":
                    draft = await fill_item_draft(console, ItemDraft())
                    report_mutation(console, await controller.create(draft))
                elif choice == "u":
                    await self._update(controller)
                elif choice == "d":
                    await self._delete(controller)
                else:
                    console.say("[error] Invalid option.")
        finally:
            controller.unmount()

    async def _update(self, controller: ResourceListController[Item, ItemDraft]) -> None:
        console = self.context.console
        item = find_item(controller, await console.ask("Item ID to update: "))
        if item is None:
            console.say("[error] Item not found on this page.")
            return
        draft = await fill_item_draft(console, controller.open_update(item))
        report_mutation(console, await controller.update(item.id, draft))

    async def _delete(self, controller: ResourceListController[Item, ItemDraft]) -> None:
        console = self.context.console
        item = find_item(controller, await console.ask("Item ID to delete: "))
        if item is None:
            console.say("[error] Item not found on this page.")
            return
        controller.request_delete(item)
        answer = await console.ask(f"Delete '{item.name}'? This cannot be undone. [y/N]: ")
        if answer.lower() != "y":
            controller.cancel_delete()
            console.say("[cancelled] Nothing was deleted.")
            return
        report_mutation(console, await controller.confirm_delete())
        controller.cancel_delete()
