#!/usr/bin/env python3
"""
LoL Chat Tools - Chat Log Parser

Parses a League of Legends chat log text file and prints the structured
report (players, kills, events, messages, system lines) as JSON.
"""

import argparse
import logging
import sys
from typing import Dict, Any, Optional

from lol_chat_tools.base import ChatLogTool, JSONTool, ToolArgumentParser
from lol_chat_tools.parser import ParsedLog, kill_ranking, parse_log

logger = logging.getLogger(__name__)


class ChatLogParserTool(JSONTool):
    """
    Converts chat log files into JSON reports.
    """

    PROG = "lol_chat_parser"
    COMMANDS = ("parse", "help", "credits")

    HELP_TEXT = f"""\
{PROG} - League of Legends chat log parser

USAGE:
    {PROG} <command> [args]

COMMANDS:
    parse <path>    Parse a text file with LoL chat logs and print structured JSON
    help            Show this help information
    credits         Show project credits

OPTIONS (parse):
    --output FILE   Write the JSON report to FILE instead of standard output
    --indent N      JSON indentation (default: parser.json_indent or 2)
    --profile NAME  Configuration profile to use
    --console       Log a kill ranking summary
"""

    CREDITS_TEXT = f"""\
{PROG} - League of Legends chat log parser

Made by Bohdan Tarverdiiev"""

    def __init__(self, config: Optional[Dict[str, Any]] = None, indent: Optional[int] = None):
        """
        Initialize the parser tool.

        Args:
            config: Configuration dictionary from Config class
            indent: JSON indentation, overrides parser.json_indent
        """
        super().__init__(config)
        self.json_indent = indent if indent is not None else int(self.get_config('parser.json_indent', 2))

    def parse_file(self, log_file: str) -> ParsedLog:
        """
        Read and parse a chat log file.

        Args:
            log_file: Path to the log file

        Returns:
            The parsed report

        Raises:
            FileNotFoundError: If the log file does not exist
        """
        content = self.read_text(log_file)
        logger.info(f"Parsing chat log: {self.resolve_path(log_file)}")
        return parse_log(content)

    def log_summary(self, report: ParsedLog) -> None:
        """Log the kill ranking of a report."""
        ranking = kill_ranking(report)
        if not ranking:
            logger.info("No kill events found.")
            return

        logger.info("Kills per player (ranked):")
        logger.info("=" * 50)
        for rank, (player, count) in enumerate(ranking, start=1):
            summary = report.player(player)
            champions = ", ".join(summary.champions) if summary else ""
            logger.info(f"{rank:3d}. {player}: {count} kills (Champions: {champions})")
        logger.info("=" * 50)

    def run(self, log_file: str, output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Parse a log file and emit its JSON report.

        Args:
            log_file: Path to the chat log
            output_path: Optional JSON output file; stdout when omitted

        Returns:
            Dictionary with the report and the output file, if any
        """
        report = self.parse_file(log_file)
        data = report.to_dict()

        output_file = None
        if output_path:
            output_file = self.write_json(data, output_path, indent=self.json_indent)
        else:
            print(self.to_json(data, indent=self.json_indent))

        return {
            "success": True,
            "report": report,
            "output_file": output_file,
        }


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = ToolArgumentParser(
        prog=ChatLogParserTool.PROG,
        description="Parse League of Legends chat logs into structured JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s parse match.txt
    %(prog)s parse match.txt --output match.json
    %(prog)s credits
        """
    )
    parser.add_argument("command", nargs="?", help="One of: parse, help, credits")
    parser.add_argument("path", nargs="?", help="Chat log file for the parse command")
    parser.add_argument("--output", help="Write the JSON report to this file")
    parser.add_argument("--indent", type=int, help="JSON indentation")

    ChatLogTool.add_standard_arguments(parser)
    return parser


def main(argv=None):
    """
    Main entry point for the chat log parser command line tool.
    """
    args = build_parser().parse_args(argv)

    if args.command in (None, "help"):
        print(ChatLogParserTool.HELP_TEXT)
        return 0

    if args.command == "credits":
        print(ChatLogParserTool.CREDITS_TEXT)
        return 0

    if args.command != "parse":
        print(f"Unknown command `{args.command}`\n", file=sys.stderr)
        print(ChatLogParserTool.HELP_TEXT, file=sys.stderr)
        return 1

    try:
        if not args.path:
            raise ValueError("missing file path for `parse` command")

        config = ChatLogParserTool.load_config(args.profile)

        tool = ChatLogParserTool(config, indent=args.indent)
        result = tool.run(args.path, args.output)

        if args.console:
            tool.log_summary(result["report"])

        return 0

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
