"""
Selection of upload candidates from the scanned file list.
"""
import os
from datetime import date
from typing import Iterable, List, Mapping

from loguru import logger

from ..models.config import LogTypeRule
from ..models.data_models import Candidate
from .key_builder import today_string


LOG_SUFFIX = '.csv'


class CandidateFilter:
    """
    Decides which scanned files are uploaded, and under which rules.

    A path is a candidate when it contains today's date as a plain substring
    and, for a given rule, starts with the rule's prefix and ends in '.csv'.
    Every matching rule yields its own candidate.
    """

    def __init__(self, rules: Mapping[str, LogTypeRule], today: date, verbose: bool = False):
        self.rules = rules
        self.today = today
        self.date_token = today_string(today)
        self.verbose = verbose

    def matching_rules(self, relative_path: str) -> List[LogTypeRule]:
        """Return the rules a relative path qualifies under, in config order."""
        if self.date_token not in relative_path:
            return []
        if not relative_path.endswith(LOG_SUFFIX):
            return []
        return [rule for rule in self.rules.values() if relative_path.startswith(rule.log_prefix)]

    def select(self, root: str, relative_paths: Iterable[str]) -> List[Candidate]:
        """
        Build the candidate list for a scan of root.

        Args:
            root: The scanned log directory
            relative_paths: Paths relative to root, as listed by the scanner

        Returns:
            List of candidates, one per (file, matching rule) pair
        """
        candidates = []
        for relative_path in relative_paths:
            for rule in self.matching_rules(relative_path):
                candidates.append(Candidate(
                    relative_path=relative_path,
                    absolute_path=os.path.join(root, *relative_path.split('/')),
                    matched_rule=rule
                ))

        logger.info(f"Found {len(candidates)} upload candidates for {self.date_token}")
        if self.verbose:
            for candidate in candidates:
                logger.debug(f"  candidate: {candidate.relative_path} (rule: {candidate.matched_rule.name})")

        return candidates
