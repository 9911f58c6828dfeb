"""
Report generation for Passcan
"""
import json
from datetime import datetime
from pathlib import Path

import click
from colorama import Fore, Style
from jinja2 import Template
from tabulate import tabulate

from passcan import __version__
from passcan.config import Config
from passcan.models import ScanResult, ScanStatus, ScanSummary
from passcan.utils import format_duration, sanitize_path

BANNER = r"""
 ____
|  _ \ __ _ ___ ___  ___ __ _ _ __
| |_) / _` / __/ __|/ __/ _` | '_ \
|  __/ (_| \__ \__ \ (_| (_| | | | |
|_|   \__,_|___/___/\___\__,_|_| |_|
Passcan - Scan your codebase for secrets before pushing!
"""

STATUS_LABELS = {
    ScanStatus.CLEAN: ('✅ Clean', Fore.GREEN),
    ScanStatus.ALERT: ('❗ Alert', Fore.RED + Style.BRIGHT),
    ScanStatus.ERROR: ('⚠️ Error', Fore.YELLOW),
}

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Passcan Report</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; }
        .header { background: #2c3e50; color: white; padding: 20px; border-radius: 5px; }
        .summary { background: #ecf0f1; padding: 15px; border-radius: 5px; margin: 20px 0; }
        table { border-collapse: collapse; width: 100%; }
        th, td { border: 1px solid #bdc3c7; padding: 8px; text-align: left; }
        .status-Clean { color: #27ae60; }
        .status-Alert { color: #e74c3c; font-weight: bold; }
        .status-Error { color: #f39c12; font-weight: bold; }
    </style>
</head>
<body>
    <div class="header">
        <h1>🔍 Passcan Secret Scan Report</h1>
        <p>Generated: {{ timestamp }} &middot; Passcan {{ version }}</p>
    </div>

    <div class="summary">
        <h2>📦 Scan Summary</h2>
        <ul>
            <li><strong>Scan Path:</strong> {{ summary.scan_path }}</li>
            <li><strong>Total files scanned:</strong> {{ summary.total_files }}</li>
            <li><strong>Files with secrets:</strong> {{ summary.files_with_secrets }}</li>
            <li><strong>Total secrets found:</strong> {{ summary.total_secrets }}</li>
            <li><strong>Unreadable files:</strong> {{ summary.error_count }}</li>
            <li><strong>Time taken:</strong> {{ duration }}</li>
        </ul>
    </div>

    <table>
        <tr><th>File Path</th><th>Status</th><th>Secrets Found</th></tr>
        {% for result in summary.results %}
        <tr>
            <td>{{ result.file_path }}</td>
            <td class="status-{{ result.status.value }}">{{ result.status.value }}</td>
            <td>{% if result.secrets %}{{ result.secrets | join(', ') }}{% elif result.error %}{{ result.error }}{% else %}-{% endif %}</td>
        </tr>
        {% endfor %}
    </table>
</body>
</html>
"""


def format_status(result: ScanResult, color: bool = True) -> str:
    label, style = STATUS_LABELS[result.status]
    return f"{style}{label}{Style.RESET_ALL}" if color else label


class ReportGenerator:
    """Renders scan summaries to the console and to report files"""

    def __init__(self, config: Config):
        self.config = config

    def print_banner(self, watching: bool = False):
        click.echo(f"{Fore.BLUE}{Style.BRIGHT}{BANNER}{Style.RESET_ALL}")
        verb = "Watching" if watching else "Scanning"
        click.echo(f"{Fore.BLUE}{Style.BRIGHT}🔍 {verb} directory:{Style.RESET_ALL} "
                   f"{Style.BRIGHT}{self.config.scan_path}{Style.RESET_ALL}\n")

    def print_table(self, summary: ScanSummary):
        if not summary.results:
            click.echo(f"{Fore.YELLOW}⚠️  No files to scan.{Style.RESET_ALL}")
            return
        click.echo(tabulate(self.table_rows(summary), headers=["File Path", "Status", "Secrets Found"],
                            tablefmt="simple"))

    def table_rows(self, summary: ScanSummary, color: bool = True):
        rows = []
        for result in summary.results:
            if result.secrets:
                detail = ", ".join(result.secrets)
            elif result.is_error:
                detail = result.error or "unreadable"
            else:
                detail = "-"
            path = sanitize_path(result.file_path)
            if color:
                path = f"{Fore.CYAN}{path}{Style.RESET_ALL}"
                detail = f"{Fore.YELLOW}{detail}{Style.RESET_ALL}"
            rows.append([path, format_status(result, color), detail])
        return rows

    def print_summary(self, summary: ScanSummary):
        click.echo(f"\n{Fore.BLUE}{Style.BRIGHT}📦 Scan Summary{Style.RESET_ALL}")
        click.echo(f"{Style.BRIGHT}Total files scanned:{Style.RESET_ALL} {Fore.CYAN}{summary.total_files}{Style.RESET_ALL}")
        click.echo(f"{Style.BRIGHT}Files with secrets:{Style.RESET_ALL} {Fore.RED}{Style.BRIGHT}{summary.files_with_secrets}{Style.RESET_ALL}")
        click.echo(f"{Style.BRIGHT}Total secrets found:{Style.RESET_ALL} {Fore.YELLOW}{Style.BRIGHT}{summary.total_secrets}{Style.RESET_ALL}")
        if summary.error_count:
            click.echo(f"{Style.BRIGHT}Unreadable files:{Style.RESET_ALL} {Fore.YELLOW}{summary.error_count}{Style.RESET_ALL}")
        click.echo(f"{Style.BRIGHT}Time taken:{Style.RESET_ALL} {Fore.MAGENTA}{format_duration(summary.duration)}{Style.RESET_ALL}")

    def render(self, summary: ScanSummary):
        """Table plus summary block, written after every scan"""
        self.print_table(summary)
        self.print_summary(summary)
        if self.config.report_format != 'table' and self.config.output_dir:
            report_path = self.generate_report(summary)
            click.echo(f"{Fore.GREEN}📊 Report saved to: {report_path}{Style.RESET_ALL}")
        click.echo(f"\n{Fore.GREEN}{Style.BRIGHT}✅ Scan completed. Stay safe!{Style.RESET_ALL}")

    def generate_report(self, summary: ScanSummary) -> str:
        """Write a report file in the configured format and return its path"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_name = f"passcan_report_{timestamp}"
        Path(self.config.output_dir).mkdir(parents=True, exist_ok=True)

        if self.config.report_format == 'json':
            return self._generate_json_report(summary, report_name)
        elif self.config.report_format == 'markdown':
            return self._generate_markdown_report(summary, report_name)
        elif self.config.report_format == 'html':
            return self._generate_html_report(summary, report_name)
        else:
            raise ValueError(f"Unsupported report format: {self.config.report_format}")

    def _generate_json_report(self, summary: ScanSummary, report_name: str) -> str:
        report_data = {
            'report_info': {
                'generated_at': datetime.now().isoformat(),
                'version': __version__,
            },
            **summary.to_dict(),
        }
        report_path = Path(self.config.output_dir) / f"{report_name}.json"
        report_path.write_text(json.dumps(report_data, indent=2), encoding='utf-8')
        return str(report_path)

    def _generate_markdown_report(self, summary: ScanSummary, report_name: str) -> str:
        md_content = f"""# 🔍 Passcan Secret Scan Report

**Generated:** {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
**Scan Path:** {summary.scan_path}

## 📦 Summary

- **Total files scanned:** {summary.total_files}
- **Files with secrets:** {summary.files_with_secrets}
- **Total secrets found:** {summary.total_secrets}
- **Unreadable files:** {summary.error_count}
- **Time taken:** {format_duration(summary.duration)}

## Files

"""
        rows = self.table_rows(summary, color=False)
        md_content += tabulate(rows, headers=["File Path", "Status", "Secrets Found"], tablefmt="github")
        md_content += "\n"

        report_path = Path(self.config.output_dir) / f"{report_name}.md"
        report_path.write_text(md_content, encoding='utf-8')
        return str(report_path)

    def _generate_html_report(self, summary: ScanSummary, report_name: str) -> str:
        template = Template(HTML_TEMPLATE, autoescape=True)
        html_content = template.render(
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            version=__version__,
            summary=summary,
            duration=format_duration(summary.duration),
        )
        report_path = Path(self.config.output_dir) / f"{report_name}.html"
        report_path.write_text(html_content, encoding='utf-8')
        return str(report_path)
