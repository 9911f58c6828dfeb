"""
Scan Manager for Passcan
Serializes full scans per root so a watch loop never overlaps two reads
of the same tree
"""
import os
import threading
from typing import Any, Callable, Dict, List

from colorama import Fore, Style

from passcan.config import Config
from passcan.models import ScanSummary
from passcan.scanner import SecretScanner


class ScanInProgressError(RuntimeError):
    """A non-blocking scan was requested while one is running for the same root"""


class ScanManager:
    """Runs one full scan at a time for any given root"""

    def __init__(self):
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._status_callbacks: List[Callable[[ScanSummary], Any]] = []

    def add_status_callback(self, callback: Callable[[ScanSummary], Any]):
        """Add callback function to receive every completed summary"""
        self._status_callbacks.append(callback)

    def is_scan_running(self, scan_path: str) -> bool:
        lock = self._locks.get(self._key(scan_path))
        return lock is not None and lock.locked()

    def run_scan(self, config: Config, blocking: bool = True) -> ScanSummary:
        """
        Run one full scan over config.scan_path and return its aggregates.

        A concurrent call for the same root waits for the running scan to
        finish, or raises ScanInProgressError when blocking is False.
        """
        lock = self._lock_for(config.scan_path)
        if not lock.acquire(blocking=blocking):
            raise ScanInProgressError(f"A scan of {config.scan_path} is already running")
        try:
            summary = SecretScanner(config).scan()
        finally:
            lock.release()

        self._notify_status(summary)
        return summary

    def _notify_status(self, summary: ScanSummary):
        for callback in self._status_callbacks:
            try:
                callback(summary)
            except Exception as e:
                print(f"{Fore.RED}Error in status callback: {e}{Style.RESET_ALL}")

    def _lock_for(self, scan_path: str) -> threading.Lock:
        key = self._key(scan_path)
        # one lock per distinct root ever scanned, kept for the manager's lifetime
        with self._locks_guard:
            return self._locks.setdefault(key, threading.Lock())

    @staticmethod
    def _key(scan_path: str) -> str:
        return os.path.realpath(os.fspath(scan_path))
