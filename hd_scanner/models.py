from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class VideoFormat:
    """
    Probed characteristics of one video asset.
    Only ever built fully populated by the video probe.
    """
    width: int
    height: int
    framerate: float
    bitrate: int  # bits/second, informational only


@dataclass(frozen=True)
class ImageFormat:
    """Probed geometry of one still-image asset."""
    width: int
    height: int


class Outcome(Enum):
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    PROBE_FAILED = "probe_failed"


@dataclass(frozen=True)
class ClassificationResult:
    outcome: Outcome
    reason: Optional[str] = None

    @classmethod
    def compliant(cls) -> "ClassificationResult":
        return cls(Outcome.COMPLIANT)

    @classmethod
    def non_compliant(cls, reason: str) -> "ClassificationResult":
        return cls(Outcome.NON_COMPLIANT, reason)

    @classmethod
    def probe_failed(cls, reason: str) -> "ClassificationResult":
        return cls(Outcome.PROBE_FAILED, reason)

    @property
    def is_compliant(self) -> bool:
        return self.outcome is Outcome.COMPLIANT


@dataclass(frozen=True)
class AssetResult:
    """One processed asset and the outcome for one media family."""
    path: Path
    kind: str  # video/image
    result: ClassificationResult


@dataclass
class ScanSummary:
    """
    Aggregate of a finished scan. Built by the coordinator after the
    join barrier; tasks never touch it.
    """
    root: Path
    results: List[AssetResult] = field(default_factory=list)

    def add(self, asset: AssetResult):
        self.results.append(asset)

    @property
    def counts(self) -> Dict[Outcome, int]:
        counts = {outcome: 0 for outcome in Outcome}
        for asset in self.results:
            counts[asset.result.outcome] += 1
        return counts

    @property
    def total(self) -> int:
        return len(self.results)
