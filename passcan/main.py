#!/usr/bin/env python3
"""
Passcan - Main Entry Point
Scan your codebase for secrets before pushing.
"""
import os
import sys

import click
from colorama import init, Fore, Style

from passcan.config import REPORT_FORMATS, Config, default_thread_count
from passcan.reporter import ReportGenerator
from passcan.scan_manager import ScanManager
from passcan.watcher import ScanWatcher

GITHUB_LINK = "https://github.com/max5010cs/passcan"


@click.command()
@click.argument('scan_path', default='.', type=str)
@click.option('--watch', is_flag=True, help='Rescan whenever files under PATH change')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--threads', '-t', default=default_thread_count, type=click.IntRange(min=1),
              help='Number of scanning threads (default: one per core)')
@click.option('--format', 'report_format', type=click.Choice(REPORT_FORMATS, case_sensitive=False),
              default='table', help='Also write a report file in this format')
@click.option('--output', '-o', 'output_dir', default='.', type=str,
              help='Output directory for report files')
@click.option('--no-progress', is_flag=True, help='Hide the progress bar')
@click.option('--fail-on-findings', is_flag=True, help='Exit with status 1 if any secret is found')
def main(scan_path, watch, verbose, threads, report_format, output_dir, no_progress, fail_on_findings):
    """
    Passcan - scan PATH for API keys, tokens and passwords.

    Walks PATH, skips ignored directories, lock files and binaries, and
    reports every file as Clean, Alert or Error.
    """
    init()

    config = Config(
        scan_path=scan_path,
        output_dir=output_dir,
        report_format=report_format.lower(),
        num_threads=threads,
        verbose=verbose,
        show_progress=not no_progress,
    )
    reporter = ReportGenerator(config)
    manager = ScanManager()
    manager.add_status_callback(reporter.render)

    if not os.path.exists(scan_path):
        click.echo(f"{Fore.YELLOW}⚠️  Path '{scan_path}' does not exist, nothing to scan.{Style.RESET_ALL}")

    try:
        if watch:
            _watch(manager, config, reporter)
            return

        reporter.print_banner()
        summary = manager.run_scan(config)
        click.echo(f"\n🔗 {Fore.BLUE}{GITHUB_LINK}{Style.RESET_ALL}")
    except KeyboardInterrupt:
        click.echo(f"\n{Fore.YELLOW}⏹️  Scan interrupted by user.{Style.RESET_ALL}")
        sys.exit(1)
    except Exception as e:
        click.echo(f"{Fore.RED}❌ Error during scan: {e}{Style.RESET_ALL}")
        sys.exit(1)

    if fail_on_findings and summary.files_with_secrets:
        sys.exit(1)


def _watch(manager: ScanManager, config: Config, reporter: ReportGenerator):
    watcher = ScanWatcher(manager, config)
    watcher.start()
    reporter.print_banner(watching=True)
    click.echo(f"{Fore.YELLOW}Watching for file changes... (Ctrl-C to stop){Style.RESET_ALL}")
    try:
        manager.run_scan(config)
        watcher.run_forever()
    finally:
        watcher.stop()


if __name__ == "__main__":
    main()
