from __future__ import annotations

import sys
from textual.app import App
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Footer, Header, Static, Tree
from textual.widgets.tree import TreeNode
from .errors import ADTError
from .tracing import TraceTree, traced


# Browser for the trace trees of constructor calls and matcher applications
class TraceTui(App[None]):
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("enter", "expand_children", "Nested"),
        ("c", "expand_children", "Nested"),
        ("s", "expand_stack", "Path"),
        ("p", "expand_pending", "Pending"),
        ("x", "collapse", "Collapse"),
    ]

    def __init__(self, traces: list[TraceTree], title: str = "adt-traces"):
        super().__init__()
        self.title = title
        self.traces = traces
        self.trace_tree = Tree[TraceTree](f"{len(traces)} traced calls")
        self.details = Static("", expand=True)

    async def on_mount(self):
        body = Vertical()
        bottom = VerticalScroll()
        self.trace_tree.styles.width = "100%"
        self.trace_tree.styles.height = "60%"
        bottom.styles.height = "40%"
        await self.mount(Header(), body, Footer())
        await body.mount(self.trace_tree, bottom)
        await bottom.mount(self.details)

        self.trace_tree.root.expand()
        _populate(self.trace_tree.root, self.traces)
        self.trace_tree.focus()

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted[TraceTree]):
        data = event.node.data
        self.details.update("" if data is None else render_details(data))

    def _expand(self, traces_of) -> None:
        node = self.trace_tree.cursor_node
        if node is None or node.data is None:
            return
        _populate(node, traces_of(node.data))
        node.expand()

    def action_expand_children(self) -> None:
        self._expand(lambda tree: tree.children)

    # last nested call of each level, down to the innermost one
    def action_expand_stack(self) -> None:
        self._expand(lambda tree: tree.stack_trace(only_pending=False))

    # only the calls that never returned, ending at the one that raised
    def action_expand_pending(self) -> None:
        self._expand(lambda tree: tree.stack_trace())

    def action_collapse(self) -> None:
        node = self.trace_tree.cursor_node
        if node is None:
            return
        node.collapse()
        node.remove_children()

def label(index: int, tree: TraceTree) -> str:
    return f"{'!' if tree.pending else ' '} {index}: {tree}"

def _populate(node: TreeNode[TraceTree], traces: list[TraceTree]):
    node.remove_children()
    for i, tree in enumerate(traces):
        node.add(label(i, tree), data=tree)

def render_details(tree: TraceTree) -> str:
    t = tree.trace
    lines = [f"type: {t.type}"]
    if t.op == "case":
        lines.append(f"matcher on: {t.matched or '<not reached>'}")
    else:
        lines.append(f"constructor: {t.op}")
    lines += [
        f"nested calls: {len(tree.children)} ({tree.size - 1} in total)",
        "",
        "args:",
        *t.args,
        "",
        "events:",
        *t.events,
        "",
        "result:",
        "<pending>" if tree.pending else t.result,
    ]
    return "\n".join(lines)

def main(argv: list[str] | None = None) -> int:
    """Import a module with tracing on and browse the traces of its first error."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: adt-traces MODULE", file=sys.stderr)
        return 2

    with traced() as recorder:
        try:
            __import__(argv[0])
        except ADTError as error:
            traces = error.traces or list(recorder.roots)
            title = f"{type(error).__name__}: {error.message}"
        else:
            traces = list(recorder.roots)
            title = f"{argv[0]}: no error"
    print(title, file=sys.stderr)

    TraceTui(traces, title).run()
    return 0
