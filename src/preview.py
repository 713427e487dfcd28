"""Command-line previewer for AI-UI descriptions."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core import configure_logging, get_logger, get_settings, safe_json_dumps, ValidationError
from renderer import ActionDispatcher, Element, Renderer, parse_ui_description
from renderer.display import to_renderable

logger = get_logger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def apply_values(root: Element, assignments: list[str]) -> list[str]:
    """
    Fill fields from ``NAME=VALUE`` assignments.

    Returns:
        Names that matched no field
    """
    missing = []
    for assignment in assignments:
        name, _, value = assignment.partition("=")
        fields = [e for e in root.find_all(name=name) if e.is_field]
        if not fields:
            missing.append(name)
            continue
        kind = fields[0].attrs.get("type")
        if kind == "radio":
            root.select_radio(name, value)
        elif kind == "checkbox":
            for field in fields:
                field.set_checked(value.lower() in TRUTHY)
        else:
            for field in fields:
                field.set_value(value)
    return missing


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render an AI-UI description in the terminal")
    parser.add_argument("path", help="UI description JSON file, or - for stdin")
    parser.add_argument("--json", action="store_true", help="Emit the rendered element tree as JSON")
    parser.add_argument("--width", type=int, default=100, help="Console width")
    parser.add_argument("--invoke", metavar="ACTION_ID", help="Invoke an action after rendering")
    parser.add_argument("--set", dest="values", action="append", default=[], metavar="NAME=VALUE",
                        help="Fill a named field before invoking (repeatable)")
    parser.add_argument("--disabled", action="store_true", help="Render with every action disabled")
    parser.add_argument("--log-level", help="Override AIUI_LOG_LEVEL")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, args.json_logs or settings.json_logs)

    console = Console(width=args.width)
    errors = Console(stderr=True, width=args.width)

    try:
        description = parse_ui_description(_read_source(args.path))
    except (OSError, ValidationError) as e:
        errors.print(Panel(Text(str(e)), title="[bold]Invalid UI description[/bold]", border_style="red"))
        return 1

    payloads: list[dict] = []
    dispatcher = ActionDispatcher(lambda action_id, payload: payloads.append(payload))
    root = Renderer().render(description, dispatcher, disabled=args.disabled)
    if root is None:
        return 0

    for name in apply_values(root, args.values):
        logger.warning("field_not_found", name=name)

    if args.json:
        print(safe_json_dumps(root.to_dict(), indent=2))
    else:
        renderable = to_renderable(root)
        if renderable is not None:
            console.print(renderable)

    if not args.invoke:
        return 0

    control = root.find(data_action=args.invoke)
    if control is None:
        errors.print(f"[red]Action not found:[/red] {args.invoke}")
        return 2

    if not control.click():
        errors.print(f"[yellow]Action is disabled:[/yellow] {args.invoke}")
        return 0

    dispatcher.wait(timeout=5)
    for payload in payloads:
        print(safe_json_dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
