"""
Search command implementation.

Prints the nodes whose content contains a query, plus the ancestor ids
that would be expanded to reveal them.
"""

import json
import sys

from soltree.core.query import flatten
from soltree.utils.colors import dim, highlight, info
from soltree.utils.exceptions import SoltreeError, format_error_json
from soltree.cli.common import (
    handle_command_error,
    load_config,
    load_session,
    report_no_traces,
)


def search_command(args) -> int:
    """
    Execute the search command.

    Args:
        args: Parsed command arguments

    Returns:
        Exit code (0 when something matched, 1 otherwise)
    """
    json_mode = getattr(args, 'json', False)

    if not args.query.strip():
        message = "Search query cannot be empty"
        if json_mode:
            print(json.dumps(format_error_json(message, "InvalidQuery"), indent=2))
        else:
            print(message, file=sys.stderr)
        return 1

    try:
        config = load_config(args)
    except SoltreeError as e:
        return handle_command_error(e, json_mode)

    session = load_session(args.trace_file, config)
    if session.is_empty:
        return report_no_traces(json_mode)

    highlighted = session.search(args.query)
    needle = args.query.lower()
    matches = [node for node in flatten(session.traces) if needle in node.content.lower()]

    if json_mode:
        print(json.dumps({
            "query": args.query,
            "matches": [node.id for node in matches],
            "highlighted": [node.id for node in flatten(session.traces) if node.id in highlighted],
        }, indent=2))
    else:
        for node in matches:
            path = " > ".join(reversed([ancestor.id for ancestor in node.ancestors()]))
            print(f"{info(node.id)} {highlight(node.content)}")
            if path:
                print(f"    {dim(path)}")
        print(f"\n{len(matches)} matches, {len(highlighted)} nodes highlighted")

    return 0 if matches else 1
