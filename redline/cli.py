import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .bootstrap import build_arg_parser, build_tool_call, maybe_save_config, merge_runtime_config
from .config import ConfigManager
from .formatter import is_failure
from .logging_config import setup_logging
from .tools import ToolExecutor

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    console = console or Console()
    err_console = Console(stderr=True)

    config_manager = ConfigManager(Path(args.config) if args.config else None)
    try:
        config, config_dict = merge_runtime_config(args, config_manager)
    except Exception as exc:
        err_console.print(str(exc), style="red")
        return 1

    setup_logging(config.log_level, config.log_file or None)

    try:
        if maybe_save_config(args, config_dict, config_manager):
            err_console.print("Configuration saved successfully!", style="green")
    except Exception as exc:
        err_console.print(str(exc), style="red")
        return 1

    executor = ToolExecutor(config=config)

    if args.command == "schema":
        console.print_json(json.dumps(executor.schemas(args.category)))
        return 0

    tool_name, tool_args = build_tool_call(args)
    logger.debug(f"Running {tool_name} on {tool_args['path']}")
    output = executor.execute(tool_name, tool_args)
    failed = is_failure(output)
    console.print(output, style="red" if failed else "green", markup=False, highlight=False, soft_wrap=True)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
