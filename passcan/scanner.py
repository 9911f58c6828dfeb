"""
Core scanning functionality for Passcan
"""
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

from colorama import Fore, Style
from tqdm import tqdm

from passcan.config import Config
from passcan.file_selector import collect_files
from passcan.models import ScanResult, ScanSummary
from passcan.secret_detector import SecretDetector


class SecretScanner:
    """Runs one full scan over config.scan_path"""

    def __init__(self, config: Config, detector: SecretDetector = None):
        self.config = config
        self.detector = detector or SecretDetector(max_line_length=config.max_line_length)
        self.lock = threading.Lock()

    def scan(self) -> ScanSummary:
        """Collect candidates, scan them on the worker pool, aggregate"""
        start_time = time.perf_counter()
        scan_path = self.config.scan_path

        if self.config.verbose:
            print(f"🔍 Scanning path: {scan_path}")
            if not os.path.exists(scan_path):
                print(f"{Fore.YELLOW}⚠️  Path not found, nothing to scan: {scan_path}{Style.RESET_ALL}")

        files_to_scan = collect_files(scan_path)

        if self.config.verbose:
            print(f"📁 Found {len(files_to_scan)} files to scan")

        results: List[ScanResult] = []
        if files_to_scan:
            self._scan_all(files_to_scan, results)

        results.sort(key=lambda r: r.file_path)
        return ScanSummary(
            scan_path=scan_path,
            results=results,
            duration=time.perf_counter() - start_time,
        )

    def _scan_all(self, files_to_scan: List[str], results: List[ScanResult]):
        with ThreadPoolExecutor(max_workers=self.config.num_threads) as executor:
            with tqdm(total=len(files_to_scan), desc="Scanning files", unit="file",
                      disable=not self.config.show_progress, leave=False) as pbar:
                futures = {
                    executor.submit(self._scan_file, file_path): file_path
                    for file_path in files_to_scan
                }
                for future in as_completed(futures):
                    file_path = futures[future]
                    try:
                        result = future.result()
                    except Exception as e:
                        result = ScanResult.failed(file_path, f"{type(e).__name__}: {e}")

                    with self.lock:
                        results.append(result)
                    pbar.update(1)

                    if self.config.verbose:
                        self._echo_result(result, pbar)

    def _scan_file(self, file_path: str) -> ScanResult:
        return self.detector.analyze_file(file_path)

    def _echo_result(self, result: ScanResult, pbar):
        if result.is_error:
            pbar.write(f"{Fore.YELLOW}⚠️  Error scanning {result.file_path}: {result.error}{Style.RESET_ALL}")
        else:
            pbar.write(f"{Fore.CYAN}📄{Style.RESET_ALL} {result.file_path}")


def run_scan(scan_path: str, verbose: bool = False, **options) -> ScanSummary:
    """Scan scan_path once with a fresh scanner and return the aggregates"""
    config = Config(scan_path=scan_path, verbose=verbose, **options)
    return SecretScanner(config).scan()
