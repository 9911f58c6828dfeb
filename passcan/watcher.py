"""
Watch mode for Passcan

Filesystem events only mark the tree dirty; the loop rescans from its own
thread, so scans run one after another and a burst of events coalesces
into a single rescan.
"""
import os
import threading
from pathlib import Path
from typing import Optional

from colorama import Fore, Style
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from passcan.config import Config
from passcan.file_selector import is_ignored_dir
from passcan.scan_manager import ScanManager

RESCAN_EVENTS = frozenset({'created', 'modified', 'deleted', 'moved'})


class _ChangeHandler(FileSystemEventHandler):
    """Flags the watcher dirty for relevant events outside ignored directories"""

    def __init__(self, root: Path, dirty: threading.Event):
        super().__init__()
        self._root = root
        self._dirty = dirty

    def on_any_event(self, event: FileSystemEvent):
        if event.event_type not in RESCAN_EVENTS:
            return
        paths = [event.src_path, getattr(event, 'dest_path', '')]
        if all(not p or self._in_ignored_dir(p) for p in paths):
            return
        self._dirty.set()

    def _in_ignored_dir(self, path) -> bool:
        try:
            rel_path = Path(os.fsdecode(path)).relative_to(self._root)
        except ValueError:
            return False
        return any(is_ignored_dir(part) for part in rel_path.parts)


class ScanWatcher:
    """Re-runs a full scan through the manager whenever the tree changes"""

    def __init__(self, manager: ScanManager, config: Config, poll_interval: float = 2.0):
        self.manager = manager
        self.config = config
        self.poll_interval = poll_interval
        self._dirty = threading.Event()
        self._stopped = threading.Event()
        self._observer: Optional[Observer] = None

    def start(self):
        root = Path(self.config.scan_path).resolve()
        if not root.is_dir():
            raise ValueError(f"Path is not a directory: {self.config.scan_path}")

        self._stopped.clear()
        self._dirty.clear()
        self._observer = Observer()
        self._observer.schedule(_ChangeHandler(root, self._dirty), str(root), recursive=True)
        self._observer.start()
        if self.config.verbose:
            print(f"{Fore.BLUE}👀 Watching directory: {root}{Style.RESET_ALL}")

    def run_forever(self):
        """Block, rescanning after each batch of changes, until stop()"""
        while not self._stopped.is_set():
            self.poll_once(timeout=self.poll_interval)

    def poll_once(self, timeout: float = 0.0) -> bool:
        """Wait up to timeout for a change; rescan if one arrived"""
        if not self._dirty.wait(timeout) or self._stopped.is_set():
            return False
        self._dirty.clear()
        print(f"{Fore.YELLOW}🔄 Change detected, rescanning...{Style.RESET_ALL}")
        self.manager.run_scan(self.config)
        return True

    def stop(self):
        self._stopped.set()
        self._dirty.set()
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=5.0)
            self._observer = None
