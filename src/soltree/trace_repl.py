"""
Trace Viewer REPL

Interactive REPL for browsing a parsed call trace: expand and collapse
calls, search, and inspect single nodes.
"""

import cmd
from typing import Optional

from soltree.cli.common import NO_TRACES_MESSAGE, normalize_node_id
from soltree.core.query import flatten
from soltree.core.renderer import render_forest
from soltree.session import TraceSession
from soltree.utils.colors import (
    bold, cyan, dim, error, info, success, warning,
    contract_name, function_name,
)
from soltree.utils.exceptions import NodeNotFoundError


class TraceViewer(cmd.Cmd):
    """Interactive call trace viewer."""

    intro = f"""
{bold('SolTree Trace Viewer')}
Type {info('help')} for commands.
Use {info('tree')} to show the call tree, {info('toggle')} <id> to expand or collapse a call, {info('search')} <text> to find calls.
"""

    def __init__(self, session: Optional[TraceSession] = None, trace_file: Optional[str] = None,
                 stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.session = session or TraceSession()
        if trace_file:
            self.do_load(trace_file)

    @property
    def prompt(self):
        if self.session.source:
            return f'{cyan("(soltree")} {dim("|")} {info(self.session.source)}{cyan(")")} '
        return f'{cyan("(soltree)")} '

    def _print(self, text: str = '') -> None:
        self.stdout.write(f"{text}\n")

    def _require_traces(self) -> bool:
        if self.session.is_empty:
            self._print(warning(NO_TRACES_MESSAGE))
            return False
        return True

    def _show_tree(self) -> None:
        lines = render_forest(
            self.session.traces,
            self.session.expanded,
            self.session.highlighted,
            self.session.config,
        )
        for line in lines:
            self._print(line)

    def do_load(self, arg):
        """Load a trace file. Usage: load <file>"""
        path = arg.strip()
        if not path:
            self._print("Usage: load <file>")
            return
        self.session.load_file(path)
        if self._require_traces():
            self._print(f"Loaded {success(str(len(self.session.traces)))} call stacks from {info(path)}")

    def do_tree(self, arg):
        """Show the visible part of the call tree. Alias: ls"""
        if self._require_traces():
            self._show_tree()

    def do_ls(self, arg):
        """Alias for tree"""
        self.do_tree(arg)

    def _change(self, arg: str, action) -> None:
        node_id = normalize_node_id(arg)
        if not node_id:
            self._print("Usage: <command> <id>")
            return
        try:
            action(node_id)
        except NodeNotFoundError as e:
            self._print(error(e.message))
            return
        self._show_tree()

    def do_toggle(self, arg):
        """Expand or collapse a node. Usage: toggle <id>"""
        if self._require_traces():
            self._change(arg, self.session.toggle)

    def do_t(self, arg):
        """Alias for toggle"""
        self.do_toggle(arg)

    def do_expand(self, arg):
        """Expand a node. Usage: expand <id>"""
        if self._require_traces():
            self._change(arg, self.session.expand)

    def do_collapse(self, arg):
        """Collapse a node. Usage: collapse <id>"""
        if self._require_traces():
            self._change(arg, self.session.collapse)

    def do_expand_all(self, arg):
        """Expand every node"""
        if self._require_traces():
            self.session.expand_all()
            self._show_tree()

    def do_collapse_all(self, arg):
        """Collapse everything except the top-level call stacks"""
        if self._require_traces():
            self.session.collapse_all()
            self._show_tree()

    def do_search(self, arg):
        """Highlight calls containing text (case-insensitive). Usage: search <text>"""
        if not self._require_traces():
            return
        matches = self.session.search(arg)
        if not arg.strip():
            self._print("Search cleared.")
            return
        if not matches:
            self._print(f"No matches for {info(repr(arg))}")
            return
        self._show_tree()
        self._print(f"{success(str(len(matches)))} nodes highlighted")

    def do_clear(self, arg):
        """Clear search highlighting"""
        self.session.clear_search()
        self._print("Search cleared.")

    def do_info(self, arg):
        """Show details of a node. Usage: info <id>"""
        if not self._require_traces():
            return
        node_id = normalize_node_id(arg)
        try:
            node = self.session.get_node(node_id)
        except NodeNotFoundError as e:
            self._print(error(e.message))
            return

        self._print(f"\n{bold(node.id)}")
        self._print(dim("-" * 50))
        self._print(f"  Content:   {node.content}")
        self._print(f"  Depth:     {node.depth}")
        self._print(f"  Stack:     {node.stack_id}")
        if node.contract_name:
            self._print(f"  Contract:  {contract_name(node.contract_name)}")
        if node.function_name:
            self._print(f"  Function:  {function_name(node.function_name)}")
        if node.call_type:
            self._print(f"  Call type: {node.call_type.value}")
        if node.is_return:
            self._print(f"  Returns:   yes")
        self._print(f"  Children:  {len(node.children)}")
        parent = node.parent
        if parent is not None:
            self._print(f"  Parent:    {parent.id}")
        self._print(dim("-" * 50))

    def do_stats(self, arg):
        """Show node counts for the loaded trace"""
        if not self._require_traces():
            return
        total = 0
        returns = 0
        max_depth = 0
        call_types = {}
        for node in flatten(self.session.traces):
            total += 1
            returns += node.is_return
            max_depth = max(max_depth, node.depth)
            if node.call_type:
                call_types[node.call_type.value] = call_types.get(node.call_type.value, 0) + 1

        self._print(f"Call stacks: {len(self.session.traces)}")
        self._print(f"Nodes:       {total}")
        self._print(f"Returns:     {returns}")
        self._print(f"Max depth:   {max_depth}")
        for name in sorted(call_types):
            self._print(f"  [{name}]: {call_types[name]}")

    def do_exit(self, arg):
        """Exit the viewer"""
        self._print("Goodbye!")
        return True

    def do_quit(self, arg):
        """Alias for exit"""
        return self.do_exit(arg)

    def do_q(self, arg):
        """Alias for exit"""
        return self.do_exit(arg)

    def do_EOF(self, arg):
        """Handle Ctrl-D"""
        self._print()
        return self.do_exit(arg)

    def emptyline(self):
        """Handle empty line (don't repeat last command)"""
        pass

    def default(self, line):
        """Handle unknown commands."""
        self._print(f"{error('Unknown command:')} '{line}'")
        self._print(f"Type {info('help')} to see available commands.")

    def do_help(self, arg):
        """Show help information."""
        if arg:
            cmd.Cmd.do_help(self, arg)
            return

        self._print(f"\n{bold('SolTree Trace Viewer Commands')}")
        self._print(dim("=" * 60))

        self._print(f"\n{cyan('Navigation:')}")
        self._print(f"  {info('tree')} (ls)           - Show the call tree")
        self._print(f"  {info('toggle')} (t) <id>     - Expand or collapse a call")
        self._print(f"  {info('expand')} <id>         - Expand a call")
        self._print(f"  {info('collapse')} <id>       - Collapse a call")
        self._print(f"  {info('expand_all')}          - Expand every call")
        self._print(f"  {info('collapse_all')}        - Show only top-level call stacks")

        self._print(f"\n{cyan('Search:')}")
        self._print(f"  {info('search')} <text>       - Highlight matching calls and reveal them")
        self._print(f"  {info('clear')}               - Clear highlighting")

        self._print(f"\n{cyan('Information:')}")
        self._print(f"  {info('info')} <id>           - Show node details")
        self._print(f"  {info('stats')}               - Show node counts")

        self._print(f"\n{cyan('Other Commands:')}")
        self._print(f"  {info('load')} <file>         - Load another trace file")
        self._print(f"  {info('help')} [command]      - Show help")
        self._print(f"  {info('exit')} (quit/q)       - Exit viewer")

        self._print(f"\n{dim('Ids may be given as trace-<n> or just <n>.')}")
        self._print(dim("=" * 60) + "\n")
