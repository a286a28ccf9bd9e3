"""Discovery of API interfaces and methods from a tree of annotated commands."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

ENDPOINT_ANNOTATION = "pp:endpoint"


@dataclass(eq=False)
class CommandNode:
    """A command in the command tree, with annotations and child commands."""

    name: str
    short: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    hidden: bool = False
    children: list[CommandNode] = field(default_factory=list)
    parent: CommandNode | None = field(default=None, repr=False)

    def add(self, child: CommandNode) -> CommandNode:
        """Attach ``child`` beneath this command and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def command_path(self) -> str:
        """Space-separated names from the root down to this command."""
        names = []
        node: CommandNode | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return " ".join(reversed(names))

    def walk(self) -> Iterator[CommandNode]:
        """Yield every descendant depth-first, children ordered by name."""
        for child in sorted(self.children, key=lambda c: c.name):
            yield child
            yield from child.walk()


def api_interface_name(endpoint: str) -> str:
    """The interface part of an endpoint id: everything before the first dot."""
    return endpoint.partition(".")[0]


def api_method_name(endpoint: str) -> str:
    """The method part of an endpoint id, or the whole id when there is none."""
    dot = endpoint.find(".")
    if 0 <= dot < len(endpoint) - 1:
        return endpoint[dot + 1 :]
    return endpoint


def _interface_short(cmd: CommandNode, name: str) -> str:
    parent = cmd.parent
    if parent is not None and parent.hidden and parent.name == name:
        return parent.short
    return cmd.short


def collect_api_interfaces(root: CommandNode) -> list[dict[str, str]]:
    """List each interface once, as ``{"name", "short"}``, sorted by name."""
    by_name: dict[str, dict[str, str]] = {}
    for cmd in root.walk():
        endpoint = cmd.annotations.get(ENDPOINT_ANNOTATION, "")
        name = api_interface_name(endpoint)
        if not name or name in by_name:
            continue
        by_name[name] = {"name": name, "short": _interface_short(cmd, name)}
    return [by_name[name] for name in sorted(by_name)]


def collect_api_methods(root: CommandNode, target: str) -> tuple[list[dict[str, str]], str]:
    """Methods of interface ``target`` sorted by name, plus the interface summary."""
    methods: list[dict[str, str]] = []
    short = ""
    prefix = root.name + " "
    for cmd in root.walk():
        endpoint = cmd.annotations.get(ENDPOINT_ANNOTATION, "")
        if api_interface_name(endpoint) != target:
            continue
        if not short:
            short = _interface_short(cmd, target)
        path = cmd.command_path()
        if path.startswith(prefix):
            path = path[len(prefix) :]
        methods.append(
            {"name": api_method_name(endpoint), "short": cmd.short, "command": path}
        )
    methods.sort(key=lambda m: m["name"])
    return methods, short