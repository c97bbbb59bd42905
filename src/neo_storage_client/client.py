"""Storage client facade wiring the session, gateway, files and resources."""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type

import httpx

from .commands import (
    Command,
    DeleteFileCommand,
    DownloadFileCommand,
    LoginCommand,
    LogoutCommand,
    NextPageCommand,
    PrevPageCommand,
    RefreshCommand,
    RenameFileCommand,
    SelectFileCommand,
    SetLimitCommand,
    SetSortCommand,
    SignupCommand,
    UploadCommand,
)
from .config.settings import ClientSettings, get_settings
from .core.exceptions import StorageClientError, describe_error
from .platform.auth.application.auth_service import AuthService
from .platform.files.application.file_actions import FileActions
from .platform.files.application.pager import FileCollectionPager
from .platform.files.application.renderer import PageRenderer
from .platform.files.application.upload_pipeline import UploadPipeline
from .platform.gateway.application.request_gateway import RequestGateway
from .platform.gateway.application.unauthorized_handler import UnauthorizedHandler
from .platform.gateway.core.protocols import Clock
from .platform.resources.application.preview_resolver import PreviewResolver
from .platform.resources.application.registry import ResourceLifecycle
from .platform.resources.application.thumbnail_resolver import ThumbnailResolver
from .platform.resources.infrastructure.object_url_store import ObjectUrlStore
from .platform.session.application.session_store import SessionStore
from .platform.session.core.protocols import TokenStorage
from .platform.session.infrastructure.token_storage import FileTokenStorage
from .ui.bindings import apply_session, bind_session_affordances
from .ui.memory_view import MemoryView
from .ui.protocols import ClientView

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong."


class StorageClient:
    """
    Entry point for UI adapters.

    Builds one shared ``httpx.AsyncClient`` and every service on top of it.
    UI code calls ``start()`` once and then forwards user actions through
    ``dispatch()``. Failures inside a command never escape ``dispatch``; they are
    logged and reported as an alert.

    Example:
        async with StorageClient(view=my_view) as client:
            await client.start()
            await client.dispatch(LoginCommand("me@example.com", "secret"))
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        view: Optional[ClientView] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        token_storage: Optional[TokenStorage] = None,
        clock: Optional[Clock] = None,
        object_store: Optional[ObjectUrlStore] = None,
    ):
        self.settings = settings or get_settings()
        self.view = view if view is not None else MemoryView()
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=self.settings.request_timeout_seconds)

        self.session_store = SessionStore(token_storage or FileTokenStorage(self.settings.token_store_path))
        bind_session_affordances(self.session_store, self.view)

        self.unauthorized_handler = UnauthorizedHandler(
            self.session_store,
            self.view,
            clock=clock,
            cooldown_seconds=self.settings.unauthorized_cooldown_seconds,
        )
        self.gateway = RequestGateway(self.http_client, self.session_store, self.unauthorized_handler)

        self.resources = ResourceLifecycle(object_store)
        self.thumbnails = ThumbnailResolver(
            self.gateway, self.session_store, self.resources.thumbnails, self.resources.store, self.settings
        )
        self.preview = PreviewResolver(
            self.gateway,
            self.session_store,
            self.resources.preview,
            self.resources.store,
            self.view,
            self.settings,
        )
        self.renderer = PageRenderer(self.view, self.thumbnails, self.preview)
        self.pager = FileCollectionPager(
            self.gateway, self.session_store, self.renderer, self.view, self.settings
        )
        self.unauthorized_handler.add_reset_listener(self.pager.reset)

        self.auth = AuthService(self.gateway, self.session_store, self.pager, self.view, self.settings)
        self.uploads = UploadPipeline(
            self.http_client,
            self.session_store,
            self.unauthorized_handler,
            self.pager,
            self.view,
            self.settings,
        )
        self.files = FileActions(self.gateway, self.session_store, self.pager, self.view, self.settings)

        self._handlers: Dict[Type[Any], Callable[[Any], Awaitable[Any]]] = {
            SignupCommand: lambda c: self.auth.signup(c.email, c.password),
            LoginCommand: lambda c: self.auth.login(c.email, c.password),
            LogoutCommand: lambda c: self.auth.logout(),
            RefreshCommand: lambda c: self.pager.refresh(),
            UploadCommand: lambda c: self.uploads.upload(c.file),
            SetLimitCommand: lambda c: self.pager.set_limit(c.limit),
            SetSortCommand: lambda c: self.pager.set_sort(c.sort),
            NextPageCommand: lambda c: self.pager.next_page(),
            PrevPageCommand: lambda c: self.pager.prev_page(),
            SelectFileCommand: lambda c: self.preview.show(c.record),
            RenameFileCommand: lambda c: self.files.rename(c.record, c.new_name),
            DeleteFileCommand: lambda c: self.files.delete(c.record),
            DownloadFileCommand: lambda c: self.files.download(c.record, c.destination),
        }

    async def start(self) -> None:
        """Publish the upload limit, re-apply the restored session and load the first page."""
        self.view.set_max_size_label(self.uploads.max_size_label)
        session = self.session_store.get_session()
        apply_session(self.view, session)
        if session.is_active:
            logger.info("Resuming persisted session")
            await self.pager.refresh()
        else:
            self.pager.reset()

    async def dispatch(self, command: Command) -> Any:
        """Run one user command; returns the handler's result or None on failure."""
        handler = self._handlers.get(type(command))
        if handler is None:
            logger.error(f"No handler for command {type(command).__name__}")
            self.view.alert(GENERIC_FAILURE_MESSAGE)
            return None
        try:
            return await handler(command)
        except StorageClientError as e:
            logger.error(f"{type(command).__name__} failed: {describe_error(e)}")
            self.view.alert(e.message)
        except Exception as e:
            logger.exception(f"{type(command).__name__} crashed: {e}")
            self.view.alert(GENERIC_FAILURE_MESSAGE)
        return None

    async def drain(self) -> None:
        """Wait for background thumbnail fetches."""
        await self.renderer.drain()

    async def aclose(self) -> None:
        self.resources.clear_all()
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "StorageClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
