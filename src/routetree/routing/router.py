"""Router and App — build a layered routing configuration.

Usage::

    api = Router()
    api.use(require_auth)
    api.get("/users", list_users)

    app = App()
    app.use(log_request)
    app.use("/api", api)

Registration order is execution order: a layer only affects layers
registered after it.
"""

from __future__ import annotations

from typing import Any

from routetree.routing.layer import Handler, Layer, RouteDef, check_handlers


class Router:
    """An ordered stack of layers, mountable inside another router.

    ``stack`` and ``params`` are public. Param handlers registered on a
    mounted router apply to the routes beneath its mount point.
    """

    __slots__ = ("params", "sensitive", "stack", "strict")

    def __init__(self, *, sensitive: bool = False, strict: bool = False) -> None:
        self.stack: list[Layer] = []
        self.params: dict[str, list[Handler]] = {}
        self.sensitive = sensitive
        self.strict = strict

    def use(self, path: str | Handler | Router, *handlers: Handler | Router) -> Router:
        """Mount middleware or routers under *path* (default ``/``)."""
        if isinstance(path, str):
            mount = path
        else:
            mount = "/"
            handlers = (path, *handlers)

        check_handlers(handlers, f"use({mount!r})", allow=(Router,))
        for handler in handlers:
            name = "router" if isinstance(handler, Router) else None
            self.stack.append(
                Layer(
                    mount,
                    handler,
                    end=False,
                    name=name,
                    sensitive=self.sensitive,
                    strict=False,
                )
            )
        return self

    def route(self, path: str) -> RouteDef:
        """Create a route layer for *path* and return its ``RouteDef``."""
        route = RouteDef(path)
        layer = Layer(
            path, None, end=True, name="route", sensitive=self.sensitive, strict=self.strict
        )
        layer.route = route
        self.stack.append(layer)
        return route

    def param(self, name: str, handler: Handler) -> Router:
        """Register *handler* to run when path parameter *name* is present."""
        check_handlers((handler,), f"param({name!r})")
        self.params.setdefault(name, []).append(handler)
        return self

    def _method(self, method: str, path: str, handlers: tuple[Handler, ...]) -> Any:
        if not handlers:
            # Decorator form: @router.get("/users")
            def decorator(func: Handler) -> Handler:
                getattr(self.route(path), method)(func)
                return func

            return decorator
        getattr(self.route(path), method)(*handlers)
        return self

    def get(self, path: str, *handlers: Handler) -> Any:
        return self._method("get", path, handlers)

    def post(self, path: str, *handlers: Handler) -> Any:
        return self._method("post", path, handlers)

    def put(self, path: str, *handlers: Handler) -> Any:
        return self._method("put", path, handlers)

    def patch(self, path: str, *handlers: Handler) -> Any:
        return self._method("patch", path, handlers)

    def delete(self, path: str, *handlers: Handler) -> Any:
        return self._method("delete", path, handlers)

    def head(self, path: str, *handlers: Handler) -> Any:
        return self._method("head", path, handlers)

    def options(self, path: str, *handlers: Handler) -> Any:
        return self._method("options", path, handlers)

    def all(self, path: str, *handlers: Handler) -> Any:
        return self._method("all", path, handlers)

    def __repr__(self) -> str:
        return f"Router({len(self.stack)} layers)"


class App:
    """Application object. Owns a root ``Router`` created on first use.

    The tree reads ``app._router.stack``; an app with nothing registered
    has no router and is rejected by ``RouteTree``.
    """

    def __init__(self, *, sensitive: bool = False, strict: bool = False) -> None:
        self._router: Router | None = None
        self._sensitive = sensitive
        self._strict = strict

    @property
    def router(self) -> Router:
        if self._router is None:
            self._router = Router(sensitive=self._sensitive, strict=self._strict)
        return self._router

    def use(self, path: str | Handler | Router, *handlers: Handler | Router) -> App:
        self.router.use(path, *handlers)
        return self

    def route(self, path: str) -> RouteDef:
        return self.router.route(path)

    def param(self, name: str, handler: Handler) -> App:
        self.router.param(name, handler)
        return self

    def _delegate(self, method: str, path: str, handlers: tuple[Handler, ...]) -> Any:
        result = getattr(self.router, method)(path, *handlers)
        return self if handlers else result

    def get(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("get", path, handlers)

    def post(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("post", path, handlers)

    def put(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("put", path, handlers)

    def patch(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("patch", path, handlers)

    def delete(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("delete", path, handlers)

    def head(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("head", path, handlers)

    def options(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("options", path, handlers)

    def all(self, path: str, *handlers: Handler) -> Any:
        return self._delegate("all", path, handlers)
