"""Practitioner roster kept in a JSON file."""
import json
import logging
import os
from typing import List

from pydantic import ValidationError

from src.application.ports import PractitionerStorePort
from src.domain.models import Practitioner


logger = logging.getLogger(__name__)


class JsonPractitionerStore(PractitionerStorePort):
    """
    Reads practitioners from a JSON array on every query.

    Each entry looks like::

        {"id": 1, "name": "Dr. A", "specialization": "Cardiologist",
         "coordinate": {"latitude": 17.4, "longitude": 78.4}, "available": true}

    A missing or unreadable file behaves as an empty roster; invalid entries
    are skipped.
    """

    def __init__(self, storage_path: str):
        self.storage_path = storage_path

    def _load(self) -> List[Practitioner]:
        """Load practitioners from the storage file."""
        if not os.path.exists(self.storage_path):
            logger.warning("Practitioner file %s not found", self.storage_path)
            return []
        try:
            with open(self.storage_path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not read practitioner file %s: %s", self.storage_path, e)
            return []
        if not isinstance(raw, list):
            logger.error("Practitioner file %s must hold a JSON array", self.storage_path)
            return []

        practitioners: List[Practitioner] = []
        for entry in raw:
            try:
                practitioners.append(Practitioner(**entry))
            except (TypeError, ValidationError) as e:
                logger.warning("Skipping invalid practitioner entry %r: %s", entry, e)
        return practitioners

    def find_by_specialization_and_available(self, specialization: str) -> List[Practitioner]:
        return [
            p for p in self._load()
            if p.available and p.specialization == specialization
        ]

    def find_all_available(self) -> List[Practitioner]:
        return [p for p in self._load() if p.available]
