"""Admin shell: the second session check wrapped around every admin page.

The route guard is the authoritative gate. The shell does not assume the
guard ran (stale caches, misrouted requests) and resolves the session again
before any page content is produced.
"""

import enum
import logging
from collections.abc import Awaitable, Callable

from starlette.responses import RedirectResponse, Response

from kedjora.core.sessions import SessionToken
from kedjora.web.guard import login_redirect_location

logger = logging.getLogger(__name__)

SessionResolver = Callable[[], Awaitable[SessionToken | None]]
PageRenderer = Callable[[SessionToken], Response]
LoadingRenderer = Callable[[], Response]


class ShellState(str, enum.Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class AdminShell:
    """
    LOADING until mount() resolves the session, then AUTHENTICATED or
    UNAUTHENTICATED. Page content is only built in the AUTHENTICATED state.

    The admin routes await mount() before render(), so a server-rendered
    response is never the loading page; render_loading is what a shell that
    has not been mounted yet produces.
    """

    def __init__(
        self,
        resolve_session: SessionResolver,
        current_url: str,
        render_loading: LoadingRenderer,
    ) -> None:
        self._resolve_session = resolve_session
        self._render_loading = render_loading
        self.current_url = current_url
        self.state = ShellState.LOADING
        self.session: SessionToken | None = None

    async def mount(self) -> ShellState:
        try:
            session = await self._resolve_session()
        except Exception:
            logger.exception("Admin shell could not resolve session; treating as unauthenticated")
            session = None
        self.session = session
        self.state = ShellState.AUTHENTICATED if session is not None else ShellState.UNAUTHENTICATED
        return self.state

    @property
    def login_location(self) -> str:
        return login_redirect_location(self.current_url)

    def render(self, children: PageRenderer) -> Response:
        if self.state is ShellState.LOADING:
            return self._render_loading()
        if self.state is ShellState.UNAUTHENTICATED or self.session is None:
            return RedirectResponse(self.login_location, status_code=303)
        return children(self.session)
