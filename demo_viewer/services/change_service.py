from __future__ import annotations

from dataclasses import dataclass

from demo_viewer.domain.errors import DemoNotFoundError
from demo_viewer.domain.models import ChangeRecord
from demo_viewer.repositories.demo_repository import DemoRepository


@dataclass
class ChangeService:
    """Reports when a demo's source file was last modified. Never cached."""
    demo_repo: DemoRepository

    def mtime(self, demo_id: str) -> ChangeRecord:
        unit = self.demo_repo.find_unit(demo_id)
        if unit is None:
            raise DemoNotFoundError(demo_id)

        # OSError propagates: the file may be gone since the listing
        st = unit.source_path.stat()
        return ChangeRecord(unit_id=unit.id, modified_at_millis=st.st_mtime_ns / 1_000_000)
