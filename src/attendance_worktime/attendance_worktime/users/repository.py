from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Agent


class RosterProvider(Protocol):
    """Giao diện roster: những người dùng thuộc phạm vi báo cáo.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_members(self, team_id: Optional[str] = None) -> Sequence[Agent]:
        """Thành viên đang hoạt động, có thể lọc theo một team."""

        raise NotImplementedError
