"""
Records produced by the YC founders crawler
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Company:
    name: str = ''
    website: str = ''


@dataclass(frozen=True)
class Founder:
    company: Company
    linkedin_profile: str


@dataclass
class CrawlResult:
    """Founders in discovery order plus per-company counters for the run"""
    founders: List[Founder] = field(default_factory=list)
    total: int = 0
    contributing: int = 0
    skipped: int = 0
