"""
Reflex state management for the payments dashboard.

AuthState gates the protected pages and drives login/logout. The token
and user are kept in the browser's localStorage under the keys ``token``
and ``user``; before every page load and screen action they are restored
into the browser's own ClientSession (see lib.clients), so sessions are
never shared between visitors.

Each transaction screen has its own state class built on
QueryScreenState, which forwards user gestures to the screen's
QueryController and copies the controller's view model into reactive
vars. Fetches run as background events, so a newer gesture can start
while an older fetch is still in flight; the controller's request epoch
decides which result is shown. Any 401 the browser receives while an
action runs sends the screen back to the login page.
"""

from typing import Any, ClassVar

import reflex as rx

from payments_ui.controllers import QueryController
from payments_ui.errors import ApiError
from payments_ui.lib import clients, logs
from payments_ui.lib.clients import ClientSession, ControllerAction
from payments_ui.models.common import PAGE_SIZE_OPTIONS
from payments_ui.models.reflex_models import TransactionModel, dict_to_transaction_model
from payments_ui.session import TOKEN_KEY, USER_KEY

LOG = logs.logger(__file__)

LOGIN_ROUTE = "/login"
HOME_ROUTE = "/"

# Select inputs cannot hold an empty value, so "any" stands in for it
ANY_OPTION = "any"


def screen_vars(controller: QueryController) -> dict[str, Any]:
    """Return the reactive var values mirroring a controller's state."""
    view = controller.view
    return {
        "rows": [dict_to_transaction_model(row, i) for i, row in enumerate(view.rows)],
        "total_count": view.total_count,
        "loading": view.loading,
        "error_message": view.error_message,
        "filters": dict(controller.filters),
        "page": controller.cursor.page,
        "page_size": controller.cursor.page_size,
        "page_count": controller.cursor.page_count,
        "summary_total": view.summary.total,
        "summary_success": view.summary.success,
        "summary_pending": view.summary.pending,
        "summary_failed": view.summary.failed,
    }


class AuthState(rx.State):
    """Login form, current user and route protection."""

    stored_token: str = rx.LocalStorage("", name=TOKEN_KEY)
    stored_user: str = rx.LocalStorage("", name=USER_KEY)

    email: str = ""
    password: str = ""
    login_error: str = ""
    is_submitting: bool = False
    user_name: str = ""
    user_email: str = ""

    def client_session(self) -> ClientSession:
        """Return this browser's session, restored from its localStorage."""
        session = clients.registry().get(self.router.session.client_token)
        current = session.restore(self.stored_token, self.stored_user)
        self.user_name = current.user.name if current.user else ""
        self.user_email = current.user.email if current.user else ""
        return session

    def forget(self) -> None:
        """Drop the browser's copy of the session."""
        self.stored_token = ""
        self.stored_user = ""
        self.user_name = ""
        self.user_email = ""

    @rx.event
    def require_login(self):
        """Page load guard: send anonymous visitors to the login page."""
        if not self.client_session().store.is_authenticated:
            return rx.redirect(LOGIN_ROUTE)

    @rx.event
    def redirect_if_logged_in(self):
        if self.client_session().store.is_authenticated:
            return rx.redirect(HOME_ROUTE)

    @rx.event
    def set_email(self, value: str):
        self.email = value

    @rx.event
    def set_password(self, value: str):
        self.password = value

    @rx.event
    async def login(self):
        self.is_submitting = True
        self.login_error = ""
        yield
        session = self.client_session()
        try:
            user = await session.auth.login(self.email, self.password)
        except ApiError as exc:
            self.login_error = exc.message
            return
        finally:
            self.is_submitting = False
        self.password = ""
        self.stored_token, self.stored_user = session.persisted()
        self.user_name = user.name if user else ""
        self.user_email = user.email if user else ""
        yield rx.redirect(HOME_ROUTE)

    @rx.event
    def logout(self):
        self.client_session().auth.logout()
        self.forget()
        return rx.redirect(LOGIN_ROUTE)


class QueryScreenState(rx.State, mixin=True):
    """
    Shared reactive state for a transaction screen.

    Subclasses set ``screen`` to a controller kind.
    """

    screen: ClassVar[str] = ""

    rows: list[TransactionModel] = []
    total_count: int = 0
    loading: bool = False
    error_message: str = ""
    filters: dict[str, str] = {}
    page: int = 0
    page_size: int = 10
    page_count: int = 1
    page_size_options: list[str] = [str(size) for size in PAGE_SIZE_OPTIONS]

    # Page-local status counts; summary_total is the server-reported total
    summary_total: int = 0
    summary_success: int = 0
    summary_pending: int = 0
    summary_failed: int = 0

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.loading and not self.error_message and len(self.rows) == 0

    @rx.var
    def page_label(self) -> str:
        current = self.page + 1 if self.total_count > 0 else 0
        return f"Page {current} of {self.page_count}"

    @rx.event(background=True)
    async def mount(self):
        return await self._run(lambda controller: controller.on_mount())

    @rx.event
    def unmount(self):
        session = clients.registry().peek(self.router.session.client_token)
        if session is not None:
            session.drop_controller(self.screen)

    @rx.event(background=True)
    async def set_filter(self, field: str, value: str):
        value = "" if value == ANY_OPTION else value
        return await self._run(lambda controller: controller.on_filter_change(field, value))

    @rx.event(background=True)
    async def search(self):
        return await self._run(lambda controller: controller.on_search())

    @rx.event(background=True)
    async def reset(self):
        return await self._run(lambda controller: controller.on_reset())

    @rx.event(background=True)
    async def refresh(self):
        return await self._run(lambda controller: controller.refresh())

    @rx.event(background=True)
    async def previous_page(self):
        return await self._run(
            lambda controller: controller.on_paginate(max(controller.cursor.page - 1, 0))
        )

    @rx.event(background=True)
    async def next_page(self):
        return await self._run(
            lambda controller: controller.on_paginate(controller.cursor.page + 1)
        )

    @rx.event(background=True)
    async def change_page_size(self, value: str):
        return await self._run(lambda controller: controller.on_paginate(0, int(value)))

    async def _run(self, action: ControllerAction):
        """
        Run a controller action and mirror its view model.

        The state is synced once as soon as the action reaches its network
        call (so the loading flag shows) and again when it completes. A
        401 seen meanwhile, even on a superseded fetch, ends the session
        in the browser and redirects to the login page.
        """
        async with self:
            auth = await self.get_state(AuthState)
            run = auth.client_session().action(self.screen, action)
        await run.start()
        async with self:
            self._sync(run.controller)
        await run.finish()
        async with self:
            self._sync(run.controller)
            if run.login_required:
                LOG.info("%s: session ended, returning to login", self.screen)
                auth = await self.get_state(AuthState)
                auth.forget()
                return rx.redirect(LOGIN_ROUTE)
        return None

    def _sync(self, controller: QueryController) -> None:
        for name, value in screen_vars(controller).items():
            setattr(self, name, value)


class DashboardState(QueryScreenState, rx.State):
    """Dashboard list with status cards."""

    screen: ClassVar[str] = "dashboard"


class TransactionsState(QueryScreenState, rx.State):
    """Search over all transactions."""

    screen: ClassVar[str] = "transactions"


class SchoolTransactionsState(QueryScreenState, rx.State):
    """Transactions of one school."""

    screen: ClassVar[str] = "school"

    searched_school_id: str = ""

    def _sync(self, controller: QueryController) -> None:
        super()._sync(controller)
        self.searched_school_id = getattr(controller, "searched_school_id", "")


class TransactionStatusState(QueryScreenState, rx.State):
    """Single order status lookup."""

    screen: ClassVar[str] = "status"

    @rx.var
    def has_transaction(self) -> bool:
        return len(self.rows) > 0
