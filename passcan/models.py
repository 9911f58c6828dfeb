"""
Data models for Passcan
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class ScanStatus(Enum):
    CLEAN = 'Clean'
    ALERT = 'Alert'
    ERROR = 'Error'


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning one file"""
    file_path: str
    status: ScanStatus
    secrets: Tuple[str, ...] = ()
    error: Optional[str] = None

    def __post_init__(self):
        if bool(self.secrets) != (self.status is ScanStatus.ALERT):
            raise ValueError(
                f"{self.status.value} result for {self.file_path} "
                f"cannot carry secrets {list(self.secrets)}"
            )
        if len(set(self.secrets)) != len(self.secrets):
            raise ValueError(f"Duplicate secret labels for {self.file_path}: {list(self.secrets)}")

    @classmethod
    def clean(cls, file_path: str) -> 'ScanResult':
        return cls(file_path=file_path, status=ScanStatus.CLEAN)

    @classmethod
    def alert(cls, file_path: str, secrets) -> 'ScanResult':
        return cls(file_path=file_path, status=ScanStatus.ALERT, secrets=tuple(secrets))

    @classmethod
    def failed(cls, file_path: str, error: str) -> 'ScanResult':
        return cls(file_path=file_path, status=ScanStatus.ERROR, error=error)

    @property
    def is_error(self) -> bool:
        return self.status is ScanStatus.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file_path': self.file_path,
            'status': self.status.value,
            'secrets': list(self.secrets),
            'error': self.error,
        }


@dataclass
class ScanSummary:
    """Aggregates for one full scan over a root path"""
    scan_path: str
    results: List[ScanResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def total_files(self) -> int:
        return len(self.results)

    @property
    def files_with_secrets(self) -> int:
        return sum(1 for r in self.results if r.status is ScanStatus.ALERT)

    @property
    def total_secrets(self) -> int:
        return sum(len(r.secrets) for r in self.results)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if r.is_error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scan_path': self.scan_path,
            'total_files': self.total_files,
            'files_with_secrets': self.files_with_secrets,
            'total_secrets': self.total_secrets,
            'errors': self.error_count,
            'duration': self.duration,
            'results': [r.to_dict() for r in self.results],
        }
