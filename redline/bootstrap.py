import argparse
from typing import Any, Dict, Tuple

from .config import Config, ConfigManager


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="redline",
        description="Bounded find-and-replace for a single file, with preview and backup",
    )
    parser.add_argument("--config", help="Path of the TOML configuration file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Save the current settings as default configuration",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Replace up to N occurrences, or preview the change")
    apply_parser.add_argument("path", help="Target file path")
    apply_parser.add_argument("original", help="Text or regular expression to find")
    apply_parser.add_argument("replacement", nargs="?", default="", help="Replacement text (default: delete)")
    apply_parser.add_argument("--regex", action="store_true", help="Treat ORIGINAL as a regular expression")
    apply_parser.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive matching")
    apply_parser.add_argument(
        "-n",
        "--max",
        dest="max_replacements",
        type=int,
        default=-1,
        help="Maximum replacements (-1 means all, 0 replaces none)",
    )
    apply_parser.add_argument("-e", "--encoding", help="File encoding (e.g., utf-8, utf-16, ascii)")
    apply_parser.add_argument("-p", "--preview", action="store_true", help="Show the change without writing")
    apply_parser.add_argument("--preview-lines", type=int, help="Number of change groups to show in preview")
    apply_parser.add_argument("--raw", dest="raw_output", action="store_true", default=None, help="Print a one-line summary")
    apply_parser.add_argument("--no-backup", dest="backup", action="store_false", default=None, help="Do not write <path>.bak")

    replace_parser = subparsers.add_parser("replace", help="Replace every occurrence in a file")
    replace_parser.add_argument("path", help="Target file path")
    replace_parser.add_argument("search", help="Text or regular expression to find")
    replace_parser.add_argument("replace", help="Replacement text")
    replace_parser.add_argument("--regex", action="store_true", help="Treat SEARCH as a regular expression")
    replace_parser.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive matching")
    replace_parser.add_argument(
        "--no-multiline",
        dest="multiline",
        action="store_false",
        help="In regex mode, anchor ^ and $ to the whole file instead of each line",
    )
    replace_parser.add_argument("-e", "--encoding", help="File encoding (e.g., utf-8, utf-16, ascii)")
    replace_parser.add_argument("--no-backup", dest="backup", action="store_false", default=None, help="Do not write <path>.bak")

    schema_parser = subparsers.add_parser("schema", help="Print the tool schemas as JSON")
    schema_parser.add_argument("--category", help="Only list tools in this category")
    return parser


def merge_runtime_config(args: argparse.Namespace, config_manager: ConfigManager) -> Tuple[Config, dict]:
    """Merge CLI args into persisted config and return both config object and dict."""
    config = config_manager.load_config()
    config_dict = config.to_dict()

    for key, value in vars(args).items():
        if value is not None and key in config_dict:
            config_dict[key] = value

    return Config.from_dict(config_dict), config_dict


def maybe_save_config(args: argparse.Namespace, config_dict: dict, config_manager: ConfigManager) -> bool:
    """Persist merged config when --save-config is set."""
    if args.save_config:
        config_manager.save_config(**config_dict)
        return True
    return False


def build_tool_call(args: argparse.Namespace) -> Tuple[str, Dict[str, Any]]:
    """Translate parsed arguments into a tool name and its JSON arguments."""
    if args.command == "replace":
        return "search_and_replace", {
            "path": args.path,
            "search": args.search,
            "replace": args.replace,
            "useRegex": args.regex,
            "caseSensitive": not args.ignore_case,
            "multiline": args.multiline,
        }

    return "apply_diff", {
        "path": args.path,
        "original": args.original,
        "replacement": args.replacement,
        "useRegex": args.regex,
        "caseSensitive": not args.ignore_case,
        "maxReplacements": args.max_replacements,
        "preview": args.preview,
    }
