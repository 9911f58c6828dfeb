"""
Passcan - scan your codebase for secrets before pushing
"""
__version__ = '1.0.0'

from passcan.config import Config
from passcan.file_selector import collect_files, iter_candidate_files
from passcan.models import ScanResult, ScanStatus, ScanSummary
from passcan.scan_manager import ScanInProgressError, ScanManager
from passcan.scanner import SecretScanner, run_scan
from passcan.secret_detector import PatternCompileError, SecretDetector

__all__ = [
    'Config',
    'PatternCompileError',
    'ScanInProgressError',
    'ScanManager',
    'ScanResult',
    'ScanStatus',
    'ScanSummary',
    'SecretDetector',
    'SecretScanner',
    'collect_files',
    'iter_candidate_files',
    'run_scan',
]
