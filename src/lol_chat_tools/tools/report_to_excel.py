"""
Report to Excel Tool

Exports a parsed chat log report to an Excel workbook with one sheet per
report section, which makes it easier to filter and sort long match logs
in spreadsheet software.
"""

import argparse
import logging
import os
from typing import Dict, List, Optional, Any

from lol_chat_tools.base import ChatLogTool, FileBasedTool, ToolArgumentParser
from lol_chat_tools.parser import ParsedLog, kill_ranking, parse_log

try:
    import pandas as pd
    import openpyxl
except ImportError:
    raise ImportError("This tool requires pandas and openpyxl. Install with: pip install pandas openpyxl")

__all__ = ['ReportExcelExporter', 'main']

logger = logging.getLogger(__name__)


class ReportExcelExporter(FileBasedTool):
    """Tool for writing a ParsedLog to an Excel workbook."""

    SHEET_COLUMNS = {
        'Players': ['name', 'champions'],
        'Kills': ['time', 'killer', 'killer_champion', 'victim', 'victim_champion',
                  'bounty', 'is_shutdown', 'is_first_blood'],
        'Events': ['time', 'team', 'description'],
        'Messages': ['time', 'channel', 'player', 'champion', 'text'],
        'System': ['text'],
        'Kill Ranking': ['rank', 'player', 'kills'],
    }
    MAX_COLUMN_WIDTH = 80

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exporter.

        Args:
            config: Optional configuration dictionary
        """
        super().__init__(config)
        self.initialize_directories()

    def build_frames(self, report: ParsedLog) -> Dict[str, pd.DataFrame]:
        """
        Build one DataFrame per worksheet.

        Args:
            report: The parsed report

        Returns:
            Mapping of sheet name to DataFrame, in workbook order
        """
        data = report.to_dict()
        rows: Dict[str, List[Dict[str, Any]]] = {
            'Players': [
                {'name': p['name'], 'champions': ", ".join(p['champions'])}
                for p in data['players']
            ],
            'Kills': data['kills'],
            'Events': data['events'],
            'Messages': data['messages'],
            'System': data['system'],
            'Kill Ranking': [
                {'rank': rank, 'player': player, 'kills': kills}
                for rank, (player, kills) in enumerate(kill_ranking(report), start=1)
            ],
        }

        frames = {}
        for sheet, columns in self.SHEET_COLUMNS.items():
            df = pd.DataFrame(rows[sheet], columns=columns)
            if sheet == 'Kills':
                df['bounty'] = pd.to_numeric(df['bounty'], errors='coerce').astype('Int64')
            frames[sheet] = df
        return frames

    def export(self, report: ParsedLog, excel_file: str) -> str:
        """
        Write the report to an Excel workbook.

        Args:
            report: The parsed report
            excel_file: Output workbook path

        Returns:
            The absolute path of the written workbook
        """
        excel_path = self.resolve_path(excel_file)
        os.makedirs(os.path.dirname(excel_path), exist_ok=True)

        frames = self.build_frames(report)
        with pd.ExcelWriter(excel_path, engine='openpyxl') as writer:
            for sheet, df in frames.items():
                df.to_excel(writer, sheet_name=sheet, index=False)
                worksheet = writer.sheets[sheet]

                for idx, column in enumerate(df.columns, 1):
                    letter = openpyxl.utils.get_column_letter(idx)
                    values = [str(column)] + [str(v) for v in df[column] if not pd.isna(v)]
                    width = min(max(len(v) for v in values) + 2, self.MAX_COLUMN_WIDTH)
                    worksheet.column_dimensions[letter].width = width

        logger.info(f"Successfully exported to {excel_path}")
        return excel_path

    def run(self, log_file: str, excel_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Parse a chat log and export it to Excel.

        Args:
            log_file: Path to the chat log
            excel_file: Output path (default: timestamped file in the output directory)

        Returns:
            Dictionary with the output file and sheet row counts
        """
        report = parse_log(self.read_text(log_file))

        if excel_file is None:
            excel_file = os.path.join(self.output_dir, self.generate_timestamped_filename("chat_report", "xlsx"))

        output_file = self.export(report, excel_file)
        return {
            "success": True,
            "output_file": output_file,
            "players": len(report.players),
            "kills": len(report.kills),
            "events": len(report.events),
            "messages": len(report.messages),
            "system": len(report.system),
        }


def main(argv=None):
    """
    Main entry point for the report to Excel command line tool.
    """
    parser = ToolArgumentParser(
        prog="lol-report-to-excel",
        description="Export a League of Legends chat log report to an Excel workbook.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s match.txt
    %(prog)s match.txt --output reports/match.xlsx

Configuration:
    - general.output_path: Directory for generated workbooks
        """
    )
    parser.add_argument("log_file", help="Chat log file to export")
    parser.add_argument("--output", help="Output workbook (default: timestamped file in the output directory)")

    ChatLogTool.add_standard_arguments(parser)
    args = parser.parse_args(argv)

    try:
        config = ReportExcelExporter.load_config(args.profile)

        exporter = ReportExcelExporter(config)
        result = exporter.run(args.log_file, args.output)

        if args.console:
            logger.info(f"Excel export completed: {result}")

        return 0

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
