from __future__ import annotations

from pos_admin.app.error_presenter import build_error_payload, print_error_banner
from pos_admin.app.forms import CredentialsDraft, validate_credentials
from pos_admin.app.infrastructure.logging.logger import get_logger, log_action
from pos_admin.app.navigation import Route
from pos_admin.app.pages.console import PageContext, print_field_errors
from pos_admin.clients.pos_sdk.exceptions import ApiError

logger = get_logger(__name__)


class LoginPage:
    def __init__(self, context: PageContext) -> None:
        self.context = context

    async def submit(self, draft: CredentialsDraft) -> bool:
        result = validate_credentials(draft)
        if not result.is_valid:
            print_field_errors(self.context.console, result.field_errors)
            return False
        try:
            login = await self.context.api.auth_client().login(**result.values)
        except ApiError as error:
            print_error_banner(build_error_payload(error))
            log_action(logger, "auth", "login", "failed", {"code": error.code})
            return False
        self.context.api.establish(login.token)
        log_action(logger, "auth", "login", "success", {"username": result.values["username"]})
        self.context.navigator.go(Route.DASHBOARD)
        return True

    async def run(self) -> None:
        console = self.context.console
        if self.context.api.current() is not None:
            self.context.navigator.go(Route.DASHBOARD)
            return
        console.say("\n=== Login ===")
        console.say("Leave username empty to register, or type 'q' to quit.")
        username = await console.ask("Username: ")
        if username.lower() == "q":
            self.context.navigator.go(Route.EXIT)
            return
        if not username:
            self.context.navigator.go(Route.REGISTER)
            return
        password = await console.ask("Password: ")
        if await self.submit(CredentialsDraft(username=username, password=password)):
            console.say("[success] Logged in.")


class RegisterPage:
    def __init__(self, context: PageContext) -> None:
        self.context = context

    async def submit(self, draft: CredentialsDraft) -> bool:
        result = validate_credentials(draft)
        if not result.is_valid:
            print_field_errors(self.context.console, result.field_errors)
            return False
        try:
            message = await self.context.api.auth_client().register(**result.values)
        except ApiError as error:
            print_error_banner(build_error_payload(error))
            log_action(logger, "auth", "register", "failed", {"code": error.code})
            return False
        self.context.console.say(f"[success] {message}")
        log_action(logger, "auth", "register", "success", {"username": result.values["username"]})
        self.context.navigator.go(Route.LOGIN)
        return True

    async def run(self) -> None:
        console = self.context.console
        console.say("\n=== Register ===")
        username = await console.ask("Username (empty to go back): ")
        if not username:
            self.context.navigator.go(Route.LOGIN)
            return
        password = await console.ask("Password: ")
        await self.submit(CredentialsDraft(username=username, password=password))
