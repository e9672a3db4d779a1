"""
Timeline Plotter Tool

Plots how kills, objective/ping events and chat messages are spread over
the game clock of a match, as a grouped bar chart with one bar group per
time bin.
"""

import argparse
import logging
import os
from typing import Dict, Any, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from lol_chat_tools.base import ChatLogTool, FileBasedTool, ToolArgumentParser
from lol_chat_tools.parser import ParsedLog, parse_log, timestamp_to_seconds

logger = logging.getLogger(__name__)


class TimelinePlotter(FileBasedTool):
    """
    Renders the activity timeline of a parsed chat log.
    """

    SERIES = ('kills', 'events', 'messages')
    SERIES_COLORS = {'kills': 'tab:red', 'events': 'tab:blue', 'messages': 'tab:green'}

    def __init__(self, config: Optional[Dict[str, Any]] = None, bin_minutes: int = None):
        """
        Initialize the Timeline Plotter.

        Args:
            config: Configuration dictionary from Config class
            bin_minutes: Width of a time bin in minutes (default: from config or 5)
        """
        super().__init__(config)
        self.initialize_directories()

        self.bin_minutes = bin_minutes if bin_minutes is not None else int(self.get_config('timeline_plotter.bin_minutes', 5))
        if self.bin_minutes <= 0:
            raise ValueError(f"bin_minutes must be positive, got {self.bin_minutes}")
        self.output_dpi = int(self.get_config('timeline_plotter.output_dpi', 150))

    def series_minutes(self, report: ParsedLog) -> Dict[str, List[float]]:
        """Game time in minutes of every kill, event and message."""
        return {
            'kills': [timestamp_to_seconds(k.time) / 60 for k in report.kills],
            'events': [timestamp_to_seconds(e.time) / 60 for e in report.events],
            'messages': [timestamp_to_seconds(m.time) / 60 for m in report.messages],
        }

    def bin_counts(self, report: ParsedLog) -> Dict[str, np.ndarray]:
        """
        Count records per time bin.

        Args:
            report: The parsed report

        Returns:
            Dictionary with the bin edges (in minutes) under 'edges' and one
            count array per series
        """
        minutes = self.series_minutes(report)
        latest = max((m for values in minutes.values() for m in values), default=0.0)

        # Always at least one bin; the last edge lies past the latest record
        bin_count = int(latest // self.bin_minutes) + 1
        edges = np.arange(bin_count + 1) * self.bin_minutes

        counts = {'edges': edges}
        for series in self.SERIES:
            counts[series], _ = np.histogram(minutes[series], bins=edges)
        return counts

    def plot(self, report: ParsedLog, output_path: str = None, title: str = None) -> str:
        """
        Plot the activity timeline and save it as an image.

        Args:
            report: The parsed report
            output_path: Path for output image (default: auto-generated)
            title: Custom title for the plot (None or empty string = no title)

        Returns:
            Path to the generated output image
        """
        counts = self.bin_counts(report)
        edges = counts['edges']
        positions = np.arange(len(edges) - 1)
        bar_width = 0.8 / len(self.SERIES)

        fig, ax = plt.subplots(figsize=(12, 5))
        for i, series in enumerate(self.SERIES):
            ax.bar(positions + i * bar_width, counts[series], width=bar_width,
                   color=self.SERIES_COLORS[series], label=f"{series} ({int(counts[series].sum())})")

        labels = [f"{int(start)}-{int(end)}" for start, end in zip(edges[:-1], edges[1:])]
        ax.set_xticks(positions + bar_width * (len(self.SERIES) - 1) / 2)
        ax.set_xticklabels(labels, rotation=45, ha='right')
        ax.set_xlabel("Game time (minutes)")
        ax.set_ylabel("Count")
        ax.legend(loc='upper right')
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold')

        if output_path is None:
            output_filename = self.generate_timestamped_filename("chat_timeline", "png")
            output_path = os.path.join(self.output_dir, output_filename)
        else:
            output_path = self.resolve_path(output_path)

        self.ensure_dir(os.path.dirname(output_path))

        fig.savefig(output_path, dpi=self.output_dpi, bbox_inches='tight', facecolor='white')
        plt.close(fig)

        logger.info(f"Timeline saved to: {output_path}")
        return output_path

    def run(self, log_file: str, output_path: str = None, title: str = None) -> Dict[str, Any]:
        """
        Parse a chat log and plot its timeline.

        Returns:
            Dictionary with the output path and total counts per series
        """
        report = parse_log(self.read_text(log_file))
        output_file = self.plot(report, output_path, title)
        return {
            "success": True,
            "output_file": output_file,
            "kills": len(report.kills),
            "events": len(report.events),
            "messages": len(report.messages),
        }


def main(argv=None):
    """
    Main entry point for the timeline plotter command line tool.
    """
    parser = ToolArgumentParser(
        prog="lol-timeline-plot",
        description="Plot kills, events and chat messages of a chat log over game time.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s match.txt
    %(prog)s match.txt --bin-minutes 2 --title "Game 3"

Configuration:
    - timeline_plotter.bin_minutes: Default bin width in minutes
    - timeline_plotter.output_dpi: Image resolution
    - general.output_path: Directory for generated images
        """
    )
    parser.add_argument("log_file", help="Chat log file to plot")
    parser.add_argument("--output", help="Output image path (default: timestamped PNG in the output directory)")
    parser.add_argument("--bin-minutes", type=int, help="Width of a time bin in minutes")
    parser.add_argument("--title", help="Chart title")

    ChatLogTool.add_standard_arguments(parser)
    args = parser.parse_args(argv)

    try:
        config = TimelinePlotter.load_config(args.profile)

        plotter = TimelinePlotter(config, bin_minutes=args.bin_minutes)
        result = plotter.run(args.log_file, args.output, args.title)

        if args.console:
            logger.info(f"Timeline plot completed: {result}")

        return 0

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
