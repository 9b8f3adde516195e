"""
Command Line Module

Entry point for querying the TODO service from a terminal:

1. Parse the command (list, get, create)
2. Issue the request through TodoApiClient
3. Print the decoded task(s) as JSON, or log the classified error

Exit codes: 0 on success, 1 on any classified failure, 130 when
interrupted.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import config
from .api import Failure, TaskItem, TodoApiClient
from .api.codec import task_to_dict


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("todo_api_client")
    logger.setLevel(logging.DEBUG)

    # Drop handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler (stderr keeps stdout for command output)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-api-client",
        description="Query a JSONPlaceholder-style TODO service."
    )
    parser.add_argument("--base-url", default=None, help="Service root URL")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log.log_level.upper(),
        help="Console log level"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List all tasks")

    get_cmd = commands.add_parser("get", help="Fetch one task by id")
    get_cmd.add_argument("task_id")

    create_cmd = commands.add_parser("create", help="Create a task")
    create_cmd.add_argument("--id", dest="task_id", default="")
    create_cmd.add_argument("--user-id", dest="owner_id", required=True)
    create_cmd.add_argument("--title", required=True)
    create_cmd.add_argument("--completed", action="store_true")

    return parser


def run(args: argparse.Namespace, client: TodoApiClient):
    """Dispatch a parsed command to the client and return its Result."""
    if args.command == "list":
        return client.list_all()
    if args.command == "get":
        return client.get_by_id(args.task_id)
    item = TaskItem(
        id=args.task_id,
        owner_id=args.owner_id,
        title=args.title,
        completed=args.completed,
    )
    return client.create(item)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the command line client."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        client = TodoApiClient(base_url=args.base_url, timeout=args.timeout)
        result = run(args, client)

        if isinstance(result, Failure):
            logger.error(f"Request failed: {result.error!r}")
            sys.exit(1)

        value = result.value
        if isinstance(value, list):
            output = [task_to_dict(task) for task in value]
        else:
            output = task_to_dict(value)
        print(json.dumps(output, indent=2))
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
