"""Routing configuration — Express-style layers, routes, and routers.

A builder for the layered configuration the route tree reads. Mount
paths are compiled to regexes when layers are created; nothing here
dispatches requests.
"""

from routetree.routing.layer import Handler, Layer, RouteDef
from routetree.routing.pattern import compile_path
from routetree.routing.router import App, Router

__all__ = ["App", "Handler", "Layer", "RouteDef", "Router", "compile_path"]
