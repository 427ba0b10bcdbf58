from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from pos_admin.app.forms import FormResult
from pos_admin.app.infrastructure.logging.logger import get_logger, log_action
from pos_admin.app.navigation import Navigator
from pos_admin.app.notifications import NotificationCenter
from pos_admin.app.state import ResourcePage
from pos_admin.clients.pos_sdk.exceptions import ApplicationError, RequestFailedError, UnauthenticatedError

E = TypeVar("E")
D = TypeVar("D")


class MutationStatus(str, Enum):
    SUCCEEDED = "succeeded"
    VALIDATION_FAILED = "validation_failed"
    FAILED = "failed"
    UNAUTHENTICATED = "unauthenticated"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class MutationResult:
    status: MutationStatus
    message: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == MutationStatus.SUCCEEDED


@dataclass(frozen=True)
class ResourceMessages:
    plural: str
    create_success: str = "Created successfully"
    create_failed: str = "Failed to create"
    update_success: str = "Updated successfully"
    update_failed: str = "Failed to update"
    delete_success: str = "Deleted successfully"
    delete_failed: str = "Failed to delete"

    @property
    def fetch_failed(self) -> str:
        return f"Failed to fetch {self.plural}"


class ResourceGateway(Generic[E, D]):
    """Binds a controller to one API resource.

    Only ``fetch`` is required; read-only resources leave the mutation hooks
    unimplemented.
    """

    async def fetch(self, page_number: int, page_size: int) -> list[E]:
        raise NotImplementedError

    async def create(self, values: Any, draft: D) -> None:
        raise NotImplementedError

    async def update(self, entity_id: str, values: Any, draft: D) -> None:
        raise NotImplementedError

    async def delete(self, entity_id: str) -> None:
        raise NotImplementedError

    def entity_id(self, entity: E) -> str:
        return str(getattr(entity, "id"))

    def to_draft(self, entity: E) -> D:
        raise NotImplementedError


class ResourceListController(Generic[E, D]):
    """Session-gated fetch/mutate loop shared by every list page.

    Holds one ``ResourcePage``. Mutations validate first, never patch the
    collection locally, and refetch on success. Results that resolve after
    ``unmount`` are dropped. Concurrent loads apply in resolution order.
    """

    def __init__(
        self,
        *,
        gateway: ResourceGateway[E, D],
        navigator: Navigator,
        notifications: NotificationCenter,
        messages: ResourceMessages,
        validator: Callable[[D], FormResult] | None = None,
        page_size: int = 10,
        logger: logging.Logger | None = None,
    ) -> None:
        self.gateway = gateway
        self.navigator = navigator
        self.notifications = notifications
        self.messages = messages
        self.validator = validator
        self.page: ResourcePage[E] = ResourcePage(page_size=page_size)
        self.pending_delete: E | None = None
        self.editing: E | None = None
        self.disposed = False
        self._logger = logger or get_logger(__name__)

    @property
    def read_only(self) -> bool:
        return self.validator is None

    @property
    def delete_dialog_open(self) -> bool:
        return self.pending_delete is not None

    async def mount(self) -> ResourcePage[E]:
        self.disposed = False
        return await self.load()

    def unmount(self) -> None:
        self.disposed = True
        self.pending_delete = None
        self.editing = None

    async def refresh(self) -> ResourcePage[E]:
        return await self.load()

    async def load(self, page_number: int | None = None, page_size: int | None = None) -> ResourcePage[E]:
        target_number = max(1, page_number) if page_number is not None else self.page.page_number
        target_size = max(1, page_size) if page_size is not None else self.page.page_size
        self.page.start_loading()
        try:
            items = await self.gateway.fetch(target_number, target_size)
        except UnauthenticatedError:
            if not self.disposed:
                self.page.reset()
                self._redirect("load")
            return self.page
        except ApplicationError as error:
            if not self.disposed:
                self.page.apply_error(error.message)
                self._log("load", "application_error", {"message": error.message})
            return self.page
        except RequestFailedError as error:
            if not self.disposed:
                self.page.apply_error(self.messages.fetch_failed)
                self._log("load", "request_failed", {"code": error.code, "status": error.status_code})
            return self.page

        if not self.disposed:
            self.page.apply_items(items, page_number=target_number, page_size=target_size)
            self._log("load", "success", {"count": len(items), "page": self.page.page_number})
        return self.page

    def open_update(self, entity: E) -> D:
        self.editing = entity
        return self.gateway.to_draft(entity)

    async def create(self, draft: D) -> MutationResult:
        return await self._submit("create", draft, None)

    async def update(self, entity_id: str, draft: D) -> MutationResult:
        return await self._submit("update", draft, str(entity_id))

    def request_delete(self, entity: E) -> None:
        self.pending_delete = entity

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> MutationResult:
        if self.pending_delete is None:
            return MutationResult(MutationStatus.BLOCKED, message="No item selected for deletion")
        return await self.remove(self.gateway.entity_id(self.pending_delete))

    async def remove(self, entity_id: str) -> MutationResult:
        if self.read_only:
            return MutationResult(MutationStatus.BLOCKED, message="Resource is read-only")
        if self.pending_delete is None or self.gateway.entity_id(self.pending_delete) != str(entity_id):
            self._log("delete", "blocked", {"id": str(entity_id)})
            return MutationResult(MutationStatus.BLOCKED, message="Deletion requires confirmation")

        try:
            await self.gateway.delete(str(entity_id))
        except UnauthenticatedError:
            return self._unauthenticated("delete")
        except ApplicationError as error:
            return self._failed("delete", error.message)
        except RequestFailedError:
            return self._failed("delete", self.messages.delete_failed)

        self.pending_delete = None
        return await self._succeeded("delete", self.messages.delete_success)

    async def _submit(self, operation: str, draft: D, entity_id: str | None) -> MutationResult:
        if self.validator is None:
            return MutationResult(MutationStatus.BLOCKED, message="Resource is read-only")
        result = self.validator(draft)
        if not result.is_valid:
            self._log(operation, "validation_failed", {"fields": sorted(result.all_errors)})
            return MutationResult(MutationStatus.VALIDATION_FAILED, field_errors=result.all_errors)

        failed_message = self.messages.create_failed if entity_id is None else self.messages.update_failed
        try:
            if entity_id is None:
                await self.gateway.create(result.values, draft)
            else:
                await self.gateway.update(entity_id, result.values, draft)
        except UnauthenticatedError:
            return self._unauthenticated(operation)
        except ApplicationError as error:
            return self._failed(operation, error.message)
        except RequestFailedError:
            return self._failed(operation, failed_message)

        if entity_id is not None:
            self.editing = None
        success_message = self.messages.create_success if entity_id is None else self.messages.update_success
        return await self._succeeded(operation, success_message)

    async def _succeeded(self, operation: str, message: str) -> MutationResult:
        self.notifications.success(message)
        self._log(operation, "success")
        if not self.disposed:
            await self.load()
        return MutationResult(MutationStatus.SUCCEEDED, message=message)

    def _failed(self, operation: str, message: str) -> MutationResult:
        self.notifications.error(message)
        self._log(operation, "failed", {"message": message})
        return MutationResult(MutationStatus.FAILED, message=message)

    def _unauthenticated(self, operation: str) -> MutationResult:
        if not self.disposed:
            self._redirect(operation)
        return MutationResult(MutationStatus.UNAUTHENTICATED, message="Session expired")

    def _redirect(self, operation: str) -> None:
        self._log(operation, "unauthenticated")
        self.navigator.redirect_to_login(f"{self.messages.plural}.{operation}")

    def _log(self, action: str, outcome: str, detail: dict[str, Any] | None = None) -> None:
        log_action(self._logger, self.messages.plural, action, outcome, detail)
