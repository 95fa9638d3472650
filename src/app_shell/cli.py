import argparse
import base64
import json
import logging
import sys
from pathlib import Path

from src.rules.loader import configure_logging, load_rules, resolve_rules_path
from src.rules.models import Rules
from src.shell.commands import SAVE_VISUALIZATION, CommandRegistry, build_registry

logger = logging.getLogger("cli")


def get_rules(rules_path: Path) -> Rules:
    try:
        return load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Rules could not be loaded: {e}")
        sys.exit(1)


def handle_commands(registry: CommandRegistry, args: argparse.Namespace) -> None:
    for name in registry.names():
        print(name)


def handle_save(registry: CommandRegistry, args: argparse.Namespace) -> None:
    if args.input == "-":
        data = sys.stdin.buffer.read()
    else:
        source = Path(args.input)
        if not source.is_file():
            logger.error(f"Input file {source} not found.")
            sys.exit(1)
        data = source.read_bytes()

    payload = {"path": args.path, "data_b64": base64.b64encode(data).decode("ascii")}
    response = registry.invoke(SAVE_VISUALIZATION, payload)
    if not response.ok:
        assert response.error is not None
        logger.error(f"{response.error.kind}: {response.error.message}")
        sys.exit(1)

    print(json.dumps(response.result))


def handle_check_rules(rules: Rules, args: argparse.Namespace) -> None:
    print(f"Rules OK: {rules.project.slug} v{rules.project.rules_version}")
    print(f"Enabled commands: {', '.join(rules.commands.enabled)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Circuit Explorer host CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $CE_RULES_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # commands
    subparsers.add_parser("commands", help="List invocable host commands")

    # save
    save_parser = subparsers.add_parser("save", help="Invoke save_visualization")
    save_parser.add_argument("path", help="Destination path")
    save_parser.add_argument(
        "--input", default="-", help="File whose bytes are saved ('-' reads stdin)"
    )

    # check_rules
    subparsers.add_parser("check_rules", help="Validate the rules file")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    rules = get_rules(Path(args.rules) if args.rules else resolve_rules_path())
    configure_logging(rules)

    if args.command == "check_rules":
        handle_check_rules(rules, args)
        return

    registry = build_registry(enabled=rules.commands.enabled)

    if args.command == "commands":
        handle_commands(registry, args)
    elif args.command == "save":
        handle_save(registry, args)


if __name__ == "__main__":
    main()
