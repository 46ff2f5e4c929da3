"""
View command implementation.

This module handles rendering a trace dump as a collapsible call tree, either
as colored text, as JSON for web app consumption, or in the interactive
viewer.
"""

from soltree.core.renderer import render_forest
from soltree.core.serializer import TraceSerializer
from soltree.utils.colors import dim, info
from soltree.utils.exceptions import SoltreeError
from soltree.utils.logging import logger
from soltree.cli.common import (
    handle_command_error,
    load_config,
    load_session,
    report_no_traces,
)


def view_command(args) -> int:
    """
    Execute the view command.

    Args:
        args: Parsed command arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    json_mode = getattr(args, 'json', False)

    try:
        config = load_config(args)
    except SoltreeError as e:
        return handle_command_error(e, json_mode)

    session = load_session(args.trace_file, config)
    if session.is_empty:
        return report_no_traces(json_mode)

    if getattr(args, 'expand_all', False):
        session.expand_all()
    if getattr(args, 'search', None):
        session.search(args.search)

    if getattr(args, 'interactive', False):
        return _start_interactive_mode(session)

    if json_mode:
        serializer = TraceSerializer()
        print(serializer.to_json(serializer.serialize_session(session)))
        return 0

    _print_tree(session)
    return 0


def _print_tree(session) -> None:
    """Print the visible part of the session's forest."""
    print(f"Trace file: {info(session.source)}")
    print(dim(f"{len(session.traces)} call stacks"))
    print(dim("-" * 80))
    for line in render_forest(session.traces, session.expanded, session.highlighted, session.config):
        print(line)
    print(dim("-" * 80))
    if session.search_term:
        print(f"Matches for {info(repr(session.search_term))}: {len(session.highlighted)}")


def _start_interactive_mode(session) -> int:
    """Start the interactive trace viewer on a loaded session."""
    from soltree.trace_repl import TraceViewer

    logger.debug("Starting interactive viewer")
    viewer = TraceViewer(session=session)
    try:
        viewer.cmdloop()
    except KeyboardInterrupt:
        print("\nInterrupted")
    return 0
