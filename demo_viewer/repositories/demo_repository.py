from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from demo_viewer.domain.models import DemoUnit

logger = logging.getLogger(__name__)


def _title_case(words: str) -> str:
    parts = [w for w in words.split("-") if w]
    return " ".join(w[:1].upper() + w[1:] for w in parts)


@dataclass
class DemoRepository:
    """
    Repository pattern: encapsulates discovering demo files on disk.
    Filenames look like "01-syntax-demo.py"; anything else is ignored.
    """
    demo_dir: Path
    suffix: str = "demo"
    extensions: Optional[frozenset[str]] = frozenset({".py"})

    def _pattern(self) -> re.Pattern:
        return re.compile(rf"^(\d+)-(.+)-({re.escape(self.suffix)})(\.[^.]+)$")

    def _parse(self, path: Path) -> Optional[DemoUnit]:
        match = self._pattern().match(path.name)
        if not match:
            return None

        demo_id, slug, suffix, ext = match.groups()
        if self.extensions is not None and ext.lower() not in self.extensions:
            return None

        return DemoUnit(
            id=demo_id,
            name=_title_case(f"{slug}-{suffix}"),
            file=path.name,
            source_path=path,
        )

    def list_units(self) -> List[DemoUnit]:
        try:
            entries = sorted(self.demo_dir.iterdir(), key=lambda p: p.name)
        except OSError:
            logger.exception("Error reading demo directory %s", self.demo_dir)
            return []

        units: List[DemoUnit] = []
        for p in entries:
            if not p.is_file():
                continue
            unit = self._parse(p)
            if unit is not None:
                units.append(unit)
        return units

    def find_unit(self, demo_id: str) -> Optional[DemoUnit]:
        return next((u for u in self.list_units() if u.id == demo_id), None)
